from treino.services.evolucoes import compute_stats


def _registrar(client, aluno_id, data, **medidas):
    r = client.post("/api/evolucoes", json={"alunoId": aluno_id, "data": data, **medidas})
    assert r.status_code == 201, r.text
    return r.json()


def test_stats_compare_first_and_last_by_date(client, aluno):
    # fora de ordem de propósito
    _registrar(client, aluno["id"], "2026-09-01", peso=80.0, gorduraCorporal=25.0, massaMuscular=30.0)
    _registrar(client, aluno["id"], "2026-07-01", peso=84.5, gorduraCorporal=28.0, massaMuscular=28.5)
    _registrar(client, aluno["id"], "2026-08-01", peso=82.0)

    r = client.get("/api/evolucoes/stats", params={"alunoId": aluno["id"]})
    assert r.status_code == 200
    stats = r.json()
    assert stats["totalRegistros"] == 3
    assert stats["primeiroRegistro"] == "2026-07-01"
    assert stats["ultimoRegistro"] == "2026-09-01"
    assert stats["pesoInicial"] == 84.5
    assert stats["pesoAtual"] == 80.0
    assert stats["pesoPerdido"] == 4.5
    assert stats["gorduraReduzida"] == 3.0
    assert stats["musculoGanho"] == 1.5


def test_stats_requires_aluno_id(client):
    r = client.get("/api/evolucoes/stats")
    assert r.status_code == 400


def test_stats_empty():
    stats = compute_stats([])
    assert stats.total_registros == 0
    assert stats.peso_perdido is None


def test_list_newest_first_and_filter(client, make_aluno):
    a1, a2 = make_aluno(), make_aluno(nome="Bruno")
    _registrar(client, a1["id"], "2026-07-01", peso=70.0)
    _registrar(client, a1["id"], "2026-09-01", peso=69.0)
    _registrar(client, a2["id"], "2026-08-01", peso=90.0)

    r = client.get("/api/evolucoes", params={"alunoId": a1["id"]})
    assert [e["data"] for e in r.json()] == ["2026-09-01", "2026-07-01"]
    assert len(client.get("/api/evolucoes").json()) == 3


def test_update_and_delete(client, aluno):
    ev = _registrar(client, aluno["id"], "2026-07-01", peso=70.0)
    r = client.put(f"/api/evolucoes/{ev['id']}", json={"peso": 71.2, "cintura": 80.0})
    assert r.status_code == 200
    assert r.json()["peso"] == 71.2
    assert r.json()["data"] == "2026-07-01"

    r = client.delete(f"/api/evolucoes/{ev['id']}")
    assert r.status_code == 204
    assert r.content == b""
    assert client.put(f"/api/evolucoes/{ev['id']}", json={}).status_code == 404
