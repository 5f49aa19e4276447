from flask import Flask
from src.config import Config
from src.routes import closure_bp

app = Flask(__name__)
app.config.from_object(Config)

# Register blueprints
app.register_blueprint(closure_bp)
