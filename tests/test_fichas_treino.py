from fastapi import status

SUPINO = {"nome": "Supino reto", "grupoMuscular": "peito", "series": 4, "repeticoes": "8-10"}
CRUCIFIXO = {"nome": "Crucifixo", "grupoMuscular": "peito", "series": 3, "repeticoes": "12"}
TRICEPS = {"nome": "Tríceps corda", "grupoMuscular": "tríceps", "descanso": 60}


def _ficha(client, **extra):
    body = {"nome": "Treino A", "objetivo": "hipertrofia", "nivel": "intermediario"}
    body.update(extra)
    r = client.post("/api/fichas-treino", json=body)
    assert r.status_code == status.HTTP_201_CREATED, r.text
    return r.json()


def test_create_numbers_exercises_by_position(client):
    ficha = _ficha(client, exercicios=[SUPINO, CRUCIFIXO, TRICEPS])
    assert ficha["ativo"] is True
    assert ficha["duracaoSemanas"] is None
    assert [(e["nome"], e["ordem"]) for e in ficha["exercicios"]] == [
        ("Supino reto", 1),
        ("Crucifixo", 2),
        ("Tríceps corda", 3),
    ]
    assert all(e["fichaId"] == ficha["id"] for e in ficha["exercicios"])


def test_explicit_order_wins_and_get_returns_sorted(client):
    ficha = _ficha(
        client,
        exercicios=[
            {**TRICEPS, "ordem": 3},
            {**SUPINO, "ordem": 1},
            {**CRUCIFIXO, "ordem": 2},
        ],
    )
    r = client.get(f"/api/fichas-treino/{ficha['id']}")
    assert r.status_code == 200
    assert [e["nome"] for e in r.json()["exercicios"]] == [
        "Supino reto",
        "Crucifixo",
        "Tríceps corda",
    ]


def test_unknown_ficha_is_404(client):
    r = client.get("/api/fichas-treino/nao-existe")
    assert r.status_code == 404
    assert r.json() == {"error": "Ficha não encontrada"}


def test_invalid_level_is_400(client):
    r = client.post("/api/fichas-treino", json={"nome": "X", "nivel": "expert"})
    assert r.status_code == 400


def test_list_newest_first(client):
    _ficha(client, nome="Treino A")
    _ficha(client, nome="Treino B")
    r = client.get("/api/fichas-treino")
    assert [f["nome"] for f in r.json()] == ["Treino B", "Treino A"]


def test_update_fields_keeps_exercises(client):
    ficha = _ficha(client, exercicios=[SUPINO])
    r = client.put(f"/api/fichas-treino/{ficha['id']}", json={"ativo": False})
    assert r.status_code == 200
    assert r.json()["ativo"] is False
    assert r.json()["nome"] == "Treino A"
    assert [e["nome"] for e in r.json()["exercicios"]] == ["Supino reto"]


def test_update_with_exercises_replaces_them(client):
    ficha = _ficha(client, exercicios=[SUPINO, CRUCIFIXO])
    r = client.put(
        f"/api/fichas-treino/{ficha['id']}", json={"exercicios": [TRICEPS]}
    )
    assert r.status_code == 200
    assert [(e["nome"], e["ordem"]) for e in r.json()["exercicios"]] == [
        ("Tríceps corda", 1)
    ]
    assert client.get("/api/fichas-treino/stats/geral").json()["totalExercicios"] == 1


def test_exercise_video_must_exist(client):
    r = client.post(
        "/api/fichas-treino",
        json={"nome": "Treino A", "exercicios": [{**SUPINO, "videoId": "nao-existe"}]},
    )
    assert r.status_code == 404
    assert r.json() == {"error": "Vídeo não encontrado"}
    assert client.get("/api/fichas-treino").json() == []


def test_atribuir_lists_with_aluno_and_removes(client, aluno):
    ficha = _ficha(client)
    r = client.post(
        f"/api/fichas-treino/{ficha['id']}/atribuir",
        json={"alunoId": aluno["id"], "dataInicio": "2026-10-19", "observacoes": "3x na semana"},
    )
    assert r.status_code == 201
    atribuicao = r.json()
    assert atribuicao["status"] == "ativo"
    assert atribuicao["aluno"] == {"id": aluno["id"], "nome": "Ana Souza", "email": aluno["email"]}

    r = client.get(f"/api/fichas-treino/{ficha['id']}/atribuicoes")
    assert [a["id"] for a in r.json()] == [atribuicao["id"]]

    r = client.delete(f"/api/fichas-treino/{ficha['id']}/atribuicoes/{atribuicao['id']}")
    assert r.status_code == 204
    assert client.get(f"/api/fichas-treino/{ficha['id']}/atribuicoes").json() == []


def test_atribuir_validations(client, aluno):
    ficha = _ficha(client)
    url = f"/api/fichas-treino/{ficha['id']}/atribuir"
    r = client.post(url, json={"alunoId": "nao-existe", "dataInicio": "2026-10-19"})
    assert r.status_code == 404
    r = client.post(
        url,
        json={"alunoId": aluno["id"], "dataInicio": "2026-10-19", "dataFim": "2026-10-01"},
    )
    assert r.status_code == 400
    r = client.post(
        "/api/fichas-treino/nao-existe/atribuir",
        json={"alunoId": aluno["id"], "dataInicio": "2026-10-19"},
    )
    assert r.status_code == 404


def test_remove_atribuicao_of_other_ficha_is_404(client, aluno):
    a, b = _ficha(client, nome="A"), _ficha(client, nome="B")
    at = client.post(
        f"/api/fichas-treino/{a['id']}/atribuir",
        json={"alunoId": aluno["id"], "dataInicio": "2026-10-19"},
    ).json()
    r = client.delete(f"/api/fichas-treino/{b['id']}/atribuicoes/{at['id']}")
    assert r.status_code == 404
    assert r.json() == {"error": "Atribuição não encontrada"}


def test_stats_geral(client, make_aluno):
    a1, a2 = make_aluno(), make_aluno(nome="Bruno Lima")
    f1 = _ficha(client, exercicios=[SUPINO, CRUCIFIXO])
    f2 = _ficha(client, nome="Treino B", ativo=False, exercicios=[TRICEPS])
    for ficha, aluno, st in ((f1, a1, "ativo"), (f2, a1, "ativo"), (f2, a2, "concluido")):
        client.post(
            f"/api/fichas-treino/{ficha['id']}/atribuir",
            json={"alunoId": aluno["id"], "dataInicio": "2026-10-01", "status": st},
        )

    r = client.get("/api/fichas-treino/stats/geral")
    assert r.status_code == 200
    assert r.json() == {
        "totalFichas": 2,
        "fichasAtivas": 1,
        "totalExercicios": 3,
        "alunosComFichas": 1,
    }


def test_delete_removes_exercises_and_assignments(client, aluno):
    ficha = _ficha(client, exercicios=[SUPINO])
    client.post(
        f"/api/fichas-treino/{ficha['id']}/atribuir",
        json={"alunoId": aluno["id"], "dataInicio": "2026-10-19"},
    )
    r = client.delete(f"/api/fichas-treino/{ficha['id']}")
    assert r.status_code == 204
    assert client.get(f"/api/fichas-treino/{ficha['id']}").status_code == 404
    assert client.get("/api/fichas-treino/stats/geral").json() == {
        "totalFichas": 0,
        "fichasAtivas": 0,
        "totalExercicios": 0,
        "alunosComFichas": 0,
    }


def test_student_sees_own_open_assignments(client, aluno, make_aluno, auth_headers):
    outro = make_aluno(nome="Carla Dias")
    ficha = _ficha(client, exercicios=[SUPINO])
    antiga = _ficha(client, nome="Adaptação")
    atribuicoes = (
        (ficha, aluno, "ativo"),
        (antiga, aluno, "concluido"),
        (ficha, outro, "ativo"),
    )
    for f, a, st in atribuicoes:
        client.post(
            f"/api/fichas-treino/{f['id']}/atribuir",
            json={"alunoId": a["id"], "dataInicio": "2026-10-19", "status": st},
        )

    r = client.get("/api/aluno/fichas", headers=auth_headers)
    assert r.status_code == 200
    body = r.json()
    assert len(body) == 1
    assert body[0]["alunoId"] == aluno["id"]
    assert body[0]["ficha"]["nome"] == "Treino A"
    assert body[0]["ficha"]["exercicios"][0]["nome"] == "Supino reto"

    assert client.get("/api/aluno/fichas").status_code == 401
