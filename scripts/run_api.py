"""Start the Video Vault API server."""

import sys
from pathlib import Path

import uvicorn

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from vault.config import settings

if __name__ == "__main__":
    uvicorn.run("vault.api.main:app", host=settings.api_host, port=settings.api_port)
