# run.py
# This script launches the Flask application.
# Because the project is installed in editable mode via pyproject.toml,
# Python knows where to find the 'starlogic' package without any path manipulation.
import os
import logging

from starlogic.app import app

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    host = os.environ.get('STARLOGIC_HOST', '0.0.0.0')
    port = int(os.environ.get('STARLOGIC_PORT', 5001))
    # The 'debug=True' flag enables auto-reloading when package files are changed.
    app.run(host=host, port=port, debug=True)
