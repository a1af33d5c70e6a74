from __future__ import annotations

import pytest


def test_create_account(client):
    resp = client.post("/api/criar-conta", json={"login": "alice", "senha": "secret1"})
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["mensagem"] == "Conta criada com sucesso"
    assert isinstance(body["id"], int)


@pytest.mark.parametrize(
    "payload",
    [{}, {"login": "alice"}, {"senha": "x"}, {"login": "", "senha": "x"}, {"login": None, "senha": "x"}],
)
def test_create_account_missing_fields(client, payload):
    resp = client.post("/api/criar-conta", json=payload)
    assert resp.status_code == 400
    assert resp.get_json() == {"erro": "Login e senha são obrigatórios"}


def test_create_account_without_json_body(client):
    resp = client.post("/api/criar-conta", data="not json", content_type="text/plain")
    assert resp.status_code == 400
    assert resp.get_json() == {"erro": "Login e senha são obrigatórios"}


def test_create_account_duplicate_login(client, registered_user):
    resp = client.post("/api/criar-conta", json={"login": "alice", "senha": "different"})
    assert resp.status_code == 400
    assert resp.get_json() == {"erro": "Login já existe"}


def test_login_success(client, registered_user):
    resp = client.post("/api/login", json={"login": "alice", "senha": "secret1"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["mensagem"] == "Login realizado com sucesso"
    assert body["token"]
    assert body["refreshToken"]
    assert body["usuario"] == {"id": registered_user["id"], "login": "alice"}


def test_login_wrong_password(client, registered_user):
    resp = client.post("/api/login", json={"login": "alice", "senha": "wrong"})
    assert resp.status_code == 401
    assert resp.get_json() == {"erro": "Credenciais inválidas"}


def test_login_unknown_user_matches_wrong_password(client, registered_user):
    unknown = client.post("/api/login", json={"login": "nobody", "senha": "secret1"})
    wrong = client.post("/api/login", json={"login": "alice", "senha": "wrong"})
    assert unknown.status_code == wrong.status_code == 401
    assert unknown.get_json() == wrong.get_json()


def test_login_missing_fields(client):
    resp = client.post("/api/login", json={"login": "alice"})
    assert resp.status_code == 400
    assert resp.get_json() == {"erro": "Login e senha são obrigatórios"}


def test_refresh_scenario(client, tokens):
    original = tokens["refreshToken"]

    resp = client.post("/api/refresh-token", json={"refreshToken": original})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["mensagem"] == "Token atualizado com sucesso"
    assert body["token"]
    assert body["refreshToken"] != original

    replay = client.post("/api/refresh-token", json={"refreshToken": original})
    assert replay.status_code == 401
    assert "erro" in replay.get_json()


def test_refreshed_access_token_works(client, tokens):
    body = client.post("/api/refresh-token", json={"refreshToken": tokens["refreshToken"]}).get_json()
    resp = client.get("/api/transacoes", headers={"Authorization": f"Bearer {body['token']}"})
    assert resp.status_code == 200


def test_refresh_missing_token(client):
    resp = client.post("/api/refresh-token", json={})
    assert resp.status_code == 400
    assert resp.get_json() == {"erro": "Refresh token é obrigatório"}


def test_refresh_invalid_token(client):
    resp = client.post("/api/refresh-token", json={"refreshToken": "garbage"})
    assert resp.status_code == 401


def test_refresh_rejects_access_token(client, tokens):
    resp = client.post("/api/refresh-token", json={"refreshToken": tokens["token"]})
    assert resp.status_code == 401


def test_root_lists_endpoints(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "POST /api/login" in resp.get_json()["endpoints"]


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/api/nao-existe")
    assert resp.status_code == 404
    assert "erro" in resp.get_json()
