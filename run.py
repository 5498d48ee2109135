# /run.py
import os

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

# Now, import the app factory
from clinic import create_app

# Create the app instance
app = create_app(os.getenv('FLASK_CONFIG', 'default'))

if __name__ == '__main__':
    # Threaded so open event streams do not block other requests
    app.run(host='127.0.0.1', port=int(os.getenv('PORT', 5000)), debug=app.config['DEBUG'], threaded=True)
