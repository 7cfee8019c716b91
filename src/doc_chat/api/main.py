"""
목적: FastAPI 앱 엔트리 포인트를 제공한다.
설명: 환경 파일을 로드한 뒤 헬스체크와 문서 업로드/질문 라우터를 등록한다.
디자인 패턴: 단일 책임 원칙(SRP)
참조: src/doc_chat/api/documents/routers/router.py, src/doc_chat/api/health/routers/server.py
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from doc_chat.shared.config import RuntimeEnvironmentLoader

# 런타임 환경(local/dev/stg/prod)을 판별해 환경 파일을 로드한다.
RUNTIME_ENV = RuntimeEnvironmentLoader().load()

# NOTE:
# .env 로딩 이후에 라우터/서비스를 import해야 설정이 최신 환경 변수를 읽는다.
from doc_chat.api.documents.routers import router as documents_router
from doc_chat.api.documents.services import shutdown_document_runtime
from doc_chat.api.health.routers import router as health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 종료 시 문서 API 리소스를 정리한다."""
    try:
        yield
    finally:
        shutdown_document_runtime()


app = FastAPI(title="doc-chat", lifespan=lifespan)
app.include_router(health_router)
app.include_router(documents_router)


@app.get("/", include_in_schema=False)
def redirect_to_docs():
    """기본 접속 시 문서 페이지로 리다이렉트한다."""
    return RedirectResponse(url="/docs")
