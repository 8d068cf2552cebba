"""
WSGI entry point for WaterWatch application
"""
from waterwatch import create_app

# Create the Flask application
app = create_app()

if __name__ == "__main__":
    app.run()
