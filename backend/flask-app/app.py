import os

from kamus_api import create_app

app = create_app()


if __name__ == "__main__":
    # Default to port 5000
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", "5000")), debug=True)
