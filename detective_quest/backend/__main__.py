"""Entry point for running the backend server."""

import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

# 加载 .env 文件（优先从 backend 目录，其次从项目根目录）
backend_dir = Path(__file__).parent
project_root = backend_dir.parent.parent

# 尝试加载 backend/.env
env_file = backend_dir / ".env"
if env_file.exists():
    load_dotenv(env_file)
    print(f"[ENV] Loaded: {env_file}")
else:
    # 尝试项目根目录
    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)
        print(f"[ENV] Loaded: {env_file}")
    else:
        print("[ENV] Warning: no .env file found")

if __name__ == "__main__":
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    print(f"[APP] Starting Detective Quest on {host}:{port}")

    uvicorn.run(
        "detective_quest.backend.app:app",
        host=host,
        port=port,
        reload=False,
    )
