#!/usr/bin/env python3
"""Start the DeckFrame API server."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "deckframe.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["deckframe"],
    )
