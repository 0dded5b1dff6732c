# debug_app.py
import os
import uvicorn

# ensure "src" is importable
os.environ.setdefault("PYTHONPATH", os.getcwd())

if __name__ == "__main__":
    os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./dev.db")
    uvicorn.run(
        "src.main:app",
        host="127.0.0.1",
        port=8000,
        reload=False,   # single process
        log_level="debug"
    )
