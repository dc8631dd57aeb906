"""
pinyin-translator FastAPI 服务

提供 RESTful API 接口
"""

import os
import time
import uuid
from typing import List, Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from pinyin_translator.engine import (
    PinyinTranslator,
    TranslatorConfig,
    create_translator,
    get_api_logger,
)

# 初始化日志
logger = get_api_logger()


# ===== 请求/响应模型 =====

class TranslateRequest(BaseModel):
    """翻译请求"""
    text: str = Field(..., description="待翻译文本")
    unmark: bool = Field(False, description="是否去掉声调")


class TranslateResponse(BaseModel):
    """翻译响应"""
    text: str
    result: str
    tokens: List[str]


class HealthResponse(BaseModel):
    """健康检查响应"""
    status: str
    version: str


# ===== 全局翻译器实例 =====
translator: Optional[PinyinTranslator] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    global translator

    logger.info("=" * 50)
    logger.info("pinyin-translator API 服务启动")
    logger.info("正在加载词典...")

    translator = create_translator(TranslatorConfig.from_env())

    logger.info(f"翻译器初始化完成: {translator!r}")
    logger.info("=" * 50)

    yield

    translator = None
    logger.info("pinyin-translator API 服务已停止")


# ===== FastAPI 应用 =====
app = FastAPI(
    title="pinyin-translator API",
    description="汉字转拼音 API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ===== 请求日志中间件 =====

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """记录所有请求的详细日志"""
    request_id = str(uuid.uuid4())[:8]
    start_time = time.perf_counter()

    client_ip = request.client.host if request.client else "unknown"
    logger.info(f"[{request_id}] --> {request.method} {request.url.path} | IP: {client_ip}")

    try:
        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        status_code = response.status_code

        log_level = "info" if status_code < 400 else "warning" if status_code < 500 else "error"
        getattr(logger, log_level)(
            f"[{request_id}] <-- {status_code} | {elapsed_ms:.2f}ms"
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{elapsed_ms:.2f}ms"

        return response

    except Exception as e:
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.error(f"[{request_id}] <-- ERROR | {elapsed_ms:.2f}ms | {type(e).__name__}: {e}")
        raise


def _require_translator() -> PinyinTranslator:
    if translator is None:
        logger.error("翻译器未就绪，拒绝请求")
        raise HTTPException(status_code=503, detail="翻译器未就绪")
    return translator


# ===== API 路由 =====

@app.get("/health", response_model=HealthResponse)
async def health_check():
    """健康检查"""
    from pinyin_translator import __version__
    return HealthResponse(
        status="healthy" if translator else "not_ready",
        version=__version__,
    )


@app.post("/translate", response_model=TranslateResponse)
async def translate(request: TranslateRequest):
    """翻译文本，同时返回整串结果和逐字列表"""
    pt = _require_translator()

    if request.unmark:
        tokens = pt.unmark_translate_as_tokens(request.text)
    else:
        tokens = pt.translate_as_tokens(request.text)

    logger.debug(f"翻译: '{request.text[:20]}' -> {len(tokens)} 项")

    return TranslateResponse(text=request.text, result="".join(tokens), tokens=tokens)


@app.get("/translate/simple")
async def simple_translate(text: str, unmark: bool = False):
    """简单查询接口"""
    pt = _require_translator()
    result = pt.unmark_translate(text) if unmark else pt.translate(text)
    return {"text": text, "result": result}


# ===== 启动入口 =====

def main():
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    log_level = os.getenv("LOG_LEVEL", "info").lower()

    logger.info(f"启动 pinyin-translator API 服务: http://{host}:{port}")
    logger.info(f"API 文档: http://{host}:{port}/docs")

    uvicorn.run(
        "pinyin_translator.api.server:app",
        host=host,
        port=port,
        reload=False,
        workers=1,
        log_level=log_level,
    )


if __name__ == "__main__":
    main()
