"""
Run the workout API locally with auto-reload.

Reads ``.env`` first so ``DATABASE_URL``, ``LOG_LEVEL`` and the frame loop
settings apply to the reloaded worker too.

Usage:
    python scripts/run_dev.py [port]
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv(project_root / ".env")

import uvicorn

from app.core.config import settings

if __name__ == "__main__":
    port = int(sys.argv[1]) if len(sys.argv) > 1 else 8000
    base = f"http://127.0.0.1:{port}"

    print("=" * 60)
    print(f"{settings.PROJECT_NAME} {settings.VERSION} (dev)")
    print("=" * 60)
    print(f"Database:      {settings.DATABASE_URL}")
    print(f"Session:       {settings.SESSION_LENGTH_MINUTES} min plans, "
          f"{settings.LOG_STORE_CAPACITY} logs kept")
    if settings.FRAME_LOOP_ENABLED:
        print(f"Frame loop:    every {settings.FRAME_INTERVAL_SECONDS}s")
    else:
        print("Frame loop:    disabled")
    print(f"Live session:  {base}/api/v1/session")
    print(f"Docs:          {base}/docs")
    print("=" * 60)

    uvicorn.run("app.main:app", host="127.0.0.1", port=port, reload=True, log_level=settings.LOG_LEVEL.lower())
