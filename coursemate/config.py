# config.py
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_DIR / "data"


class Settings(BaseSettings):
    # Prerequisite lookup endpoint, one GET per course: {prereq_api_url}/{course}
    prereq_api_url: str = "http://localhost:8000/api"
    lookup_timeout: Optional[float] = None  # None = transport default (no timeout)
    lookup_concurrency: int = 1  # 1 = strictly sequential lookups

    # Collapse duplicate graph nodes in /academic/plan responses
    merge_graph_nodes: bool = True

    programs_dir: Path = DATA_DIR / "programs"
    prerequisites_file: Path = DATA_DIR / "prerequisites.json"

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    class Config:
        env_prefix = "COURSEMATE_"  # Load settings from environment variables with COURSEMATE_ prefix


# Load settings from environment variables
settings = Settings()
