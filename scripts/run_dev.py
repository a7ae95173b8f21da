"""
Development server launcher.

Loads .env file and runs FastAPI with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

import uvicorn

from profilehub.core.config import settings

if __name__ == "__main__":
    print("=" * 60)
    print("profilehub Development Server")
    print("=" * 60)
    print()
    print(f"API: http://localhost:{settings.PORT}")
    print(f"Docs: http://localhost:{settings.PORT}/docs")
    print()
    print("Press Ctrl+C to stop")
    print("=" * 60)

    uvicorn.run("profilehub.main:app", host=settings.HOST, port=settings.PORT, reload=True,
                log_level=settings.LOG_LEVEL.lower())
