# product_api/main.py
import uvicorn

from product_api.api import create_app
from product_api.utils.settings import APP_PORT

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=APP_PORT)
