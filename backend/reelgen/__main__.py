"""
Reel generator API launcher.

Usage:
  python -m reelgen            # serve on 0.0.0.0:8000
  python -m reelgen --dev      # auto-reload
"""
import os
import sys

import uvicorn


def main() -> None:
    uvicorn.run(
        "reelgen.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload="--dev" in sys.argv,
    )


if __name__ == "__main__":
    main()
