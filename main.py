"""
Client Service entry point
"""

# Load environment variables from .env file FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

from app.main import main


if __name__ == "__main__":
    main()
