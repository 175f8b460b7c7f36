"""FastAPI entry point for the detective quest game."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .game_session import GameSession
from .loaders import list_cases

app = FastAPI(title="Detective Quest")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 游戏会话
session: Optional[GameSession] = None


def _load_session(case_id: Optional[str] = None) -> GameSession:
    """创建会话；案件不存在返回 404，案件配置错误返回 400"""
    try:
        return GameSession.from_case(case_id)
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def get_session() -> GameSession:
    global session
    if session is None:
        session = _load_session()
    return session


# ============================================================
# 请求模型
# ============================================================

class ActionRequest(BaseModel):
    command: str


class AccuseRequest(BaseModel):
    suspect: str


class ResetRequest(BaseModel):
    case: Optional[str] = None


# ============================================================
# API 端点
# ============================================================

@app.get("/api/state")
async def get_state() -> Dict[str, Any]:
    """获取游戏状态"""
    return get_session().snapshot()


@app.get("/api/cases")
async def get_cases() -> Dict[str, Any]:
    """获取可选案件"""
    return {"cases": list_cases()}


@app.get("/api/clues")
async def get_clues() -> Dict[str, Any]:
    """获取已收集的线索（字典序）"""
    clues = get_session().collected_clues()
    return {"clues": clues, "count": len(clues)}


@app.post("/api/action")
async def do_action(request: ActionRequest) -> Dict[str, Any]:
    """执行导航指令"""
    s = get_session()
    result = s.apply_command(request.command)
    return {"result": result.to_dict(), "state": s.snapshot()}


@app.post("/api/accuse")
async def accuse(request: AccuseRequest) -> Dict[str, Any]:
    """指控嫌疑人"""
    s = get_session()
    result = s.accuse(request.suspect)
    return {"result": result.to_dict(), "state": s.snapshot()}


@app.post("/api/reset")
async def reset_game(request: Optional[ResetRequest] = None) -> Dict[str, Any]:
    """重置游戏，可切换案件"""
    global session
    case_id = request.case if request else None
    session = _load_session(case_id)
    return {"message": "Game reset", "state": session.snapshot()}


@app.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}
