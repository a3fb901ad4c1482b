import httpx

from treino.services.storage import StorageClient, file_name_from_url

PDF_URL = "https://xyz.supabase.co/storage/v1/object/public/treinos-pdf/1729_treino%20A.pdf"


def test_file_name_from_url():
    assert file_name_from_url(PDF_URL) == "1729_treino A.pdf"
    assert file_name_from_url(None) is None
    assert file_name_from_url("") is None


def test_storage_client_remove_sends_prefixes():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=[])

    client = StorageClient(
        "https://xyz.supabase.co", "service-key", transport=httpx.MockTransport(handler)
    )
    assert client.remove("treinos-pdf", ["a.pdf"]) is True
    req = calls[0]
    assert req.method == "DELETE"
    assert req.url.path == "/storage/v1/object/treinos-pdf"
    assert req.headers["apikey"] == "service-key"
    assert b'"prefixes"' in req.content


def test_storage_client_remove_failure_returns_false():
    client = StorageClient(
        "https://xyz.supabase.co",
        "k",
        transport=httpx.MockTransport(lambda r: httpx.Response(500)),
    )
    assert client.remove("fotos-progresso", ["x.jpg"]) is False


def test_treino_pdf_crud_and_delete_removes_file(client, aluno, storage):
    r = client.post(
        "/api/treinos-pdf",
        json={"alunoId": aluno["id"], "nome": "Treino A", "pdfUrl": PDF_URL},
    )
    assert r.status_code == 201
    treino = r.json()
    assert treino["dataUpload"]

    r = client.put(f"/api/treinos-pdf/{treino['id']}", json={"descricao": "Peito e tríceps"})
    assert r.json()["descricao"] == "Peito e tríceps"
    assert r.json()["nome"] == "Treino A"

    r = client.get("/api/treinos-pdf", params={"alunoId": aluno["id"]})
    assert len(r.json()) == 1

    r = client.delete(f"/api/treinos-pdf/{treino['id']}")
    assert r.status_code == 204
    assert storage.removed == [("treinos-pdf", ["1729_treino A.pdf"])]
    assert client.get("/api/treinos-pdf").json() == []


def test_treino_pdf_unknown(client):
    assert client.delete("/api/treinos-pdf/nao-existe").status_code == 404


def test_fotos_progresso(client, aluno, storage):
    url = "https://xyz.supabase.co/storage/v1/object/public/fotos-progresso/frente.jpg"
    r = client.post(
        "/api/fotos-progresso",
        json={"alunoId": aluno["id"], "data": "2026-10-01", "tipo": "front", "urlFoto": url},
    )
    assert r.status_code == 201
    foto = r.json()
    client.post(
        "/api/fotos-progresso",
        json={"alunoId": aluno["id"], "data": "2026-10-15", "tipo": "side", "urlFoto": url},
    )

    r = client.get("/api/fotos-progresso", params={"alunoId": aluno["id"]})
    assert [f["data"] for f in r.json()] == ["2026-10-15", "2026-10-01"]
    r = client.get(
        "/api/fotos-progresso", params={"alunoId": aluno["id"], "data": "2026-10-01"}
    )
    assert [f["tipo"] for f in r.json()] == ["front"]

    r = client.delete(f"/api/fotos-progresso/{foto['id']}")
    assert r.status_code == 204
    assert storage.removed == [("fotos-progresso", ["frente.jpg"])]


def test_fotos_require_aluno_id(client):
    assert client.get("/api/fotos-progresso").status_code == 400


def test_invalid_foto_tipo(client, aluno):
    r = client.post(
        "/api/fotos-progresso",
        json={"alunoId": aluno["id"], "data": "2026-10-01", "tipo": "top", "urlFoto": "x"},
    )
    assert r.status_code == 400


VIDEO_URL = "https://xyz.supabase.co/storage/v1/object/public/treinos-video/agachamento.mp4"


def _video(client, nome="Agachamento livre", **extra):
    body = {"nome": nome, "urlVideo": VIDEO_URL, "objetivo": "pernas", "duracao": 95}
    body.update(extra)
    r = client.post("/api/admin/treinos-video", json=body)
    assert r.status_code == 201, r.text
    return r.json()


def test_storage_client_signed_url():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(
            200, json={"signedURL": "/object/sign/treinos-video/a%20b.mp4?token=abc"}
        )

    client = StorageClient(
        "https://xyz.supabase.co", "k", transport=httpx.MockTransport(handler)
    )
    url = client.create_signed_url("treinos-video", "a b.mp4", 7200)
    assert url == "https://xyz.supabase.co/storage/v1/object/sign/treinos-video/a%20b.mp4?token=abc"
    assert calls[0].method == "POST"
    assert calls[0].url.raw_path == b"/storage/v1/object/sign/treinos-video/a%20b.mp4"
    assert b'"expiresIn":7200' in calls[0].content.replace(b" ", b"")


def test_storage_client_signed_url_failure_returns_none():
    client = StorageClient(
        "https://xyz.supabase.co",
        "k",
        transport=httpx.MockTransport(lambda r: httpx.Response(404, json={"error": "not_found"})),
    )
    assert client.create_signed_url("treinos-video", "x.mp4", 60) is None


def test_treino_video_crud_and_filter(client):
    video = _video(client)
    _video(client, nome="Prancha", objetivo="core")
    assert video["dataUpload"]
    assert video["thumbnailUrl"] is None

    r = client.get("/api/treinos-video", params={"objetivo": "pernas"})
    assert [v["nome"] for v in r.json()] == ["Agachamento livre"]
    r = client.get("/api/admin/treinos-video")
    assert [v["nome"] for v in r.json()] == ["Prancha", "Agachamento livre"]

    r = client.put(
        f"/api/admin/treinos-video/{video['id']}", json={"descricao": "Foco na descida"}
    )
    assert r.status_code == 200
    assert r.json()["descricao"] == "Foco na descida"
    assert r.json()["nome"] == "Agachamento livre"

    assert client.get(f"/api/treinos-video/{video['id']}").json()["duracao"] == 95


def test_treino_video_stream_uses_signed_url(client, storage):
    video = _video(client)
    r = client.get(f"/api/treinos-video/{video['id']}/stream")
    assert r.status_code == 200
    body = r.json()
    assert body["expiresIn"] == 7200
    assert body["streamUrl"].startswith("https://storage.test/treinos-video/agachamento.mp4")
    assert storage.signed == [("treinos-video", "agachamento.mp4", 7200)]


def test_treino_video_stream_failure_is_500(client, storage, monkeypatch):
    video = _video(client)
    monkeypatch.setattr(storage, "create_signed_url", lambda *a: None)
    r = client.get(f"/api/treinos-video/{video['id']}/stream")
    assert r.status_code == 500
    assert r.json() == {"error": "Falha ao gerar URL de streaming"}


def test_treino_video_delete_removes_video_and_thumbnail(client, storage):
    thumb = "https://xyz.supabase.co/storage/v1/object/public/treinos-video/agachamento.jpg"
    video = _video(client, thumbnailUrl=thumb)
    r = client.delete(f"/api/admin/treinos-video/{video['id']}")
    assert r.json() == {"message": "Vídeo deletado com sucesso"}
    assert storage.removed == [("treinos-video", ["agachamento.mp4", "agachamento.jpg"])]
    r = client.get(f"/api/treinos-video/{video['id']}")
    assert r.status_code == 404
    assert r.json() == {"error": "Vídeo não encontrado"}
