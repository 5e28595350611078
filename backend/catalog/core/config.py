import json
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    image_dir: str = "images"
    items_file: str = "items.json"
    front_url: str = "http://localhost:3000"
    log_level: str = "DEBUG"
    port: int = 9000

    @property
    def cors_origins_list(self):
        origins = self.front_url.strip()
        if not origins:
            return []
        if origins.startswith("["):
            try:
                parsed = json.loads(origins)
            except json.JSONDecodeError:
                parsed = None
            if isinstance(parsed, list):
                return [str(item).strip() for item in parsed if str(item).strip()]
        return [x.strip() for x in origins.split(",") if x.strip()]

    class Config:
        env_prefix = ""
        case_sensitive = False

settings = Settings()
