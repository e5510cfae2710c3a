"""
Main entry point for FX Chart Analyzer Web Server.

FastAPI server for the chart upload and analysis REST API.
Run from project root: python main_fx_chart_web_server.py
"""

import os

from web.app import app  # noqa: F401

if __name__ == "__main__":
    import uvicorn

    # Parse PORT with error handling
    try:
        port = int(os.getenv("PORT", "8000"))
    except ValueError:
        print(f"Invalid PORT value: {os.getenv('PORT')}. Using default 8000.")
        port = 8000

    uvicorn.run(
        "web.app:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=port,
        reload=os.getenv("ENV", "development") != "production",
    )
