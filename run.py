import uvicorn
import sys
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.absolute())
sys.path.insert(0, project_root)

from mock_interview.core.config import EnvironmentType, get_settings

if __name__ == "__main__":
    settings = get_settings()

    if not settings.STATIC_DIR.is_dir():
        print(f"Warning: no static directory at {settings.STATIC_DIR}, serving the API only")

    # Run the application
    uvicorn.run(
        "mock_interview.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == EnvironmentType.DEVELOPMENT
    )
