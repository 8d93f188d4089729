from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings
from app.data.database import init_db, close_db
from app.middleware.access_log import AccessLogMiddleware
from app.routes.user import router as user_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # O schema normalmente já existe; criação só quando configurado
    if settings.AUTO_CREATE_TABLES:
        init_db()
    yield
    close_db()


app = FastAPI(
    title="User Records API",
    description="API para cadastro de usuários (nome e idade)",
    version="1.0.0",
    lifespan=lifespan
)

# Configuração de CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Log de acesso em todas as requisições
app.add_middleware(AccessLogMiddleware)

# Incluir rotas
app.include_router(user_router, prefix="/users", tags=["Usuários"])

@app.get("/", tags=["Root"])
def read_root():
    return {"message": "API de usuários está online e funcional!"}
