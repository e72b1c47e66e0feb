import atexit

from app import create_app
from app.extensions import shutdown_store

app = create_app()
atexit.register(shutdown_store, app)

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000)
