"""
Main entry point for the FastAPI application.

Usage:
    python run.py

Or with uvicorn directly:
    uvicorn user_service.fastapi_app:create_fastapi_app --factory --host 0.0.0.0 --port 5001 --reload
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from user_service.config.settings import get_config

if __name__ == "__main__":
    config = get_config()
    debug = config.DEBUG

    print(f"Starting user service in {config.APP_ENV} mode...")
    print(f"Server running on http://{config.HOST}:{config.PORT}")
    print(f"API docs available at http://{config.HOST}:{config.PORT}/docs")

    uvicorn.run(
        "user_service.fastapi_app:create_fastapi_app",
        factory=True,
        host=config.HOST,
        port=config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
