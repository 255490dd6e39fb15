# app/config.py
import os


class Settings:
    """Settings read from the environment. Call load_dotenv() before importing."""

    SUPABASE_PROJECT_URL: str = os.getenv("SUPABASE_PROJECT_URL", "")
    SUPABASE_ANON_KEY: str = os.getenv("SUPABASE_ANON_KEY", "")
    SUPABASE_SERVICE_ROLE_KEY: str = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def has_supabase_credentials(cls) -> bool:
        return all([cls.SUPABASE_PROJECT_URL, cls.SUPABASE_ANON_KEY, cls.SUPABASE_SERVICE_ROLE_KEY])


settings = Settings()
