"""
Process entry point.

    uvicorn taskhub.main:app
"""
import uvicorn
from taskhub.app import create_app
from taskhub.modules.config import load_settings
from taskhub.modules.logging_setup import setup_logging

settings = load_settings()
setup_logging(settings)

app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
