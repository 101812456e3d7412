import os

from app import app
from src import config

if __name__ == "__main__":
    import uvicorn

    # Nền tảng triển khai (Render) cung cấp PORT qua biến môi trường
    port = int(os.environ.get("PORT", config.PORT))

    print(f"Starting server on port {port}")
    print(f"Medical data: {config.MEDICAL_DATA_PATH}")

    uvicorn.run(app, host="0.0.0.0", port=port)
