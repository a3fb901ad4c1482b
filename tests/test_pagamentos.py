import pytest


@pytest.fixture
def assinatura(client, aluno):
    r = client.post(
        "/api/admin/assinaturas",
        json={
            "alunoId": aluno["id"],
            "planoTipo": "mensal",
            "preco": 15000,
            "dataInicio": "2026-10-01",
            "dataFim": "2026-10-31",
        },
    )
    assert r.status_code == 201, r.text
    return r.json()


def _pagar(client, assinatura_id, **extra):
    body = {"assinaturaId": assinatura_id, "status": "pendente", "valor": 15000, "metodo": "pix"}
    body.update(extra)
    return client.post("/api/admin/pagamentos", json=body)


def test_create_and_get(client, assinatura):
    r = _pagar(client, assinatura["id"], mercadoPagoPaymentId="mp-1")
    assert r.status_code == 201
    pagamento = r.json()
    assert pagamento["valor"] == 15000
    assert pagamento["dataPagamento"] is None

    r = client.get(f"/api/admin/pagamentos/{pagamento['id']}")
    assert r.json()["mercadoPagoPaymentId"] == "mp-1"


def test_create_unknown_subscription(client):
    r = _pagar(client, "nao-existe")
    assert r.status_code == 404


@pytest.mark.parametrize("campo,valor", [("metodo", "cheque"), ("status", "pago"), ("valor", 0)])
def test_create_invalid_payload(client, assinatura, campo, valor):
    r = _pagar(client, assinatura["id"], **{campo: valor})
    assert r.status_code == 400


def test_amount_is_immutable(client, assinatura):
    pagamento = _pagar(client, assinatura["id"]).json()
    r = client.put(f"/api/admin/pagamentos/{pagamento['id']}", json={"valor": 1})
    assert r.status_code == 400
    assert client.get(f"/api/admin/pagamentos/{pagamento['id']}").json()["valor"] == 15000


def test_approving_stamps_payment_date(client, assinatura):
    pagamento = _pagar(client, assinatura["id"]).json()
    r = client.put(f"/api/admin/pagamentos/{pagamento['id']}", json={"status": "aprovado"})
    assert r.status_code == 200
    assert r.json()["status"] == "aprovado"
    assert r.json()["dataPagamento"].startswith("2026-10-21T10:00:00")


def test_list_filtered_by_subscription(client, aluno, assinatura):
    outra = client.post(
        "/api/admin/assinaturas",
        json={
            "alunoId": aluno["id"],
            "planoTipo": "trimestral",
            "preco": 40000,
            "dataInicio": "2026-10-01",
            "dataFim": "2026-12-31",
        },
    ).json()
    _pagar(client, assinatura["id"])
    _pagar(client, outra["id"], valor=40000)

    r = client.get("/api/admin/pagamentos", params={"assinaturaId": outra["id"]})
    assert [p["valor"] for p in r.json()] == [40000]
    assert len(client.get("/api/admin/pagamentos").json()) == 2


def test_stats(client, assinatura):
    _pagar(client, assinatura["id"], status="aprovado", valor=10000)
    _pagar(client, assinatura["id"], status="aprovado", valor=5000, metodo="credit_card")
    _pagar(client, assinatura["id"], status="pendente")
    _pagar(client, assinatura["id"], status="recusado", metodo="boleto")

    r = client.get("/api/admin/pagamentos/stats")
    assert r.status_code == 200
    stats = r.json()
    assert stats["total"] == 4
    assert stats["aprovados"] == 2
    assert stats["pendentes"] == 1
    assert stats["recusados"] == 1
    assert stats["cancelados"] == 0
    assert stats["valorTotal"] == 15000
    assert stats["porMetodo"] == {"pix": 2, "credit_card": 1, "boleto": 1}


def test_webhook_approves_payment_and_reactivates_subscription(client, assinatura):
    pagamento = _pagar(client, assinatura["id"], mercadoPagoPaymentId="123").json()
    client.post(f"/api/admin/assinaturas/{assinatura['id']}/cancelar")

    r = client.post("/api/webhook/mercadopago", json={"type": "payment", "data": {"id": 123}})
    assert r.status_code == 200
    assert r.json() == {"received": True}

    assert client.get(f"/api/admin/pagamentos/{pagamento['id']}").json()["status"] == "aprovado"
    assert client.get(f"/api/admin/assinaturas/{assinatura['id']}").json()["status"] == "ativa"


@pytest.mark.parametrize(
    "body",
    [{"type": "payment", "data": {"id": "desconhecido"}}, {"type": "plan"}, {}],
)
def test_webhook_always_acknowledges(client, body):
    r = client.post("/api/webhook/mercadopago", json=body)
    assert r.status_code == 200
    assert r.json() == {"received": True}
