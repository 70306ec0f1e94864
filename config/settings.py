from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()

class CompassSettings(BaseSettings):
    questionnaire_path: str = "assets/questionnaire.yml"
    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(env_prefix='COMPASS_')

# Instantiate settings
settings = CompassSettings()
