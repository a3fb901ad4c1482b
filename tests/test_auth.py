from fastapi import status

from treino.core.security import create_access_token, decode_token, hash_password, verify_password


def test_password_hashing():
    h = hash_password("Senha123!")
    assert h != "Senha123!"
    assert verify_password("Senha123!", h)
    assert not verify_password("errada", h)


def test_token_round_trip_checks_type():
    token = create_access_token("user-1", role="aluno")
    payload = decode_token(token)
    assert payload["sub"] == "user-1"
    assert payload["role"] == "aluno"


def test_login_and_me(client, aluno):
    r = client.post("/api/auth/login", json={"email": aluno["email"], "senha": "Senha123!"})
    assert r.status_code == status.HTTP_200_OK
    body = r.json()
    assert body["tokenType"] == "bearer"

    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['accessToken']}"})
    assert r.status_code == 200
    me = r.json()
    assert me["role"] == "aluno"
    assert me["nome"] == "Ana Souza"
    assert me["alunoId"] == aluno["id"]


def test_login_wrong_password(client, aluno):
    r = client.post("/api/auth/login", json={"email": aluno["email"], "senha": "errada"})
    assert r.status_code == status.HTTP_401_UNAUTHORIZED
    assert r.json() == {"error": "Credenciais inválidas"}


def test_login_unknown_email(client):
    r = client.post("/api/auth/login", json={"email": "ninguem@academia.com", "senha": "x"})
    assert r.status_code == 401
