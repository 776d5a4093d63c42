from .env import load_project_dotenv  # noqa: F401
from .logger import get_logger  # noqa: F401

# Load the project .env on first import so AppConfig.from_env sees it.
load_project_dotenv()
