import copy
import json

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from reelgen.db.models import Base
from reelgen.db.session import get_db
from reelgen.llm.base import LLMClient
from reelgen.llm.client import get_llm_client
from reelgen.main import app


SAMPLE_RESULT = {
    "script": {
        "hook": "Ninguém te conta isso sobre clínicas lotadas.",
        "development": "Clínicas que aparecem no Explorar fazem uma coisa simples: mostram o antes e depois do paciente.",
        "closing": "E é por isso que a primeira frase deste vídeo importa.",
    },
    "screenText": {
        "frame1": "Sua clínica é invisível?",
        "frame2": "Mostre o resultado real",
        "frame3": "Volte ao início",
    },
    "videoPrompts": [
        {
            "title": "Abertura",
            "prompt": "Recepção de clínica moderna, câmera na mão, vertical 9:16 aspect ratio",
            "continuationPrompt": "A câmera avança até o consultório, vertical 9:16 aspect ratio",
        },
        {
            "title": "Fechamento",
            "prompt": "Close no rosto do paciente sorrindo, vertical 9:16 aspect ratio",
            "continuationPrompt": None,
        },
    ],
    "algorithmObjective": "Alcance frio no Explorar",
    "caption": "Sua clínica merece ser vista. Salve para lembrar.",
    "variations": {
        "alternativeHooks": ["Hook A", "Hook B", "Hook C"],
        "alternativeClosings": ["Fechamento A", "Fechamento B"],
        "controversialVersion": "Sua clínica não precisa de mais pacientes, precisa de vergonha na cara.",
    },
}

SAMPLE_REQUEST = {
    "businessType": "clínica",
    "painPoint": "nao_aparece",
    "objective": "alcance_frio",
    "tone": "direto",
}


def fenced(payload: dict) -> str:
    return "```json\n" + json.dumps(payload, ensure_ascii=False) + "\n```"


class StubLLM(LLMClient):
    """Returns a canned completion, or raises a canned error."""

    def __init__(self, content: str = None, error: Exception = None):
        self.content = content
        self.error = error
        self.calls = []

    def generate(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture
def sample_result():
    return copy.deepcopy(SAMPLE_RESULT)


@pytest.fixture
def sample_request():
    return dict(SAMPLE_REQUEST)


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autocommit=False, autoflush=False)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def llm():
    return StubLLM(content=fenced(SAMPLE_RESULT))


@pytest.fixture
def client(session_factory, llm):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_llm_client] = lambda: llm
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_and_sign_in(client, email="dona@clinica.com", password="segredo123"):
    client.post("/auth/signup", json={"email": email, "password": password, "displayName": "Dona"})
    response = client.post("/auth/signin", json={"email": email, "password": password})
    return response.json()["accessToken"]


@pytest.fixture
def token(client):
    return register_and_sign_in(client)


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
