# run_dev.py
"""
Local development launcher for the Deck Brief API.
Serves POST /api/generate (deck text in, summary + VC brief out) on port 8000.
Equivalent to: `uvicorn deckbrief.app:app --reload --host 0.0.0.0 --port 8000`

Set OPENAI_API_KEY and/or GEMINI_API_KEY in .env.dev, or USE_ECHO=1 to run
without any provider account.
"""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "deckbrief.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
