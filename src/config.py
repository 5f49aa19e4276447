import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration"""

    # Relation limits
    MAX_UNIVERSE_SIZE = int(os.getenv('WARSHALL_MAX_UNIVERSE_SIZE', '49'))
    MAX_LINE_LENGTH = int(os.getenv('WARSHALL_MAX_LINE_LENGTH', '1024'))
    LABEL_LIMIT = 26  # one lowercase letter per element

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Flask
    PORT = int(os.getenv('PORT', '5001'))
    DEBUG = os.getenv('FLASK_ENV') == 'development'
