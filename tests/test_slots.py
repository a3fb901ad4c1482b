from datetime import date, time

import pytest

from treino.services.slots import generate_block_slots

QUARTA = "2026-10-21"


def test_generate_exact_division():
    slots = generate_block_slots(time(8, 0), time(10, 0), 60)
    assert slots == [(time(8, 0), time(9, 0)), (time(9, 0), time(10, 0))]


def test_generate_overrun_emits_partial_last_slot():
    slots = generate_block_slots(time(8, 0), time(9, 30), 60, allow_overrun=True)
    assert [s for s, _ in slots] == [time(8, 0), time(9, 0)]
    assert slots[-1][1] == time(10, 0)


def test_generate_without_overrun_keeps_whole_slots_only():
    slots = generate_block_slots(time(8, 0), time(9, 30), 60, allow_overrun=False)
    assert slots == [(time(8, 0), time(9, 0))]


def test_generate_rejects_non_positive_duration():
    with pytest.raises(ValueError):
        generate_block_slots(time(8, 0), time(9, 0), 0)


def test_horarios_disponiveis_marks_taken_slot(client, aluno, bloco):
    r = client.post(
        "/api/admin/agendamentos",
        json={
            "alunoId": aluno["id"],
            "dataAgendamento": QUARTA,
            "horaInicio": "09:00",
            "blocoHorarioId": bloco["id"],
        },
    )
    assert r.status_code == 201

    r = client.get("/api/agendamentos/horarios-disponiveis", params={"data": QUARTA})
    assert r.status_code == 200
    assert r.json() == [
        {"horaInicio": "08:00", "horaFim": "09:00", "disponivel": True},
        {"horaInicio": "09:00", "horaFim": "10:00", "disponivel": False},
    ]


def test_horarios_disponiveis_other_weekday_is_empty(client, bloco):
    r = client.get(
        "/api/agendamentos/horarios-disponiveis", params={"data": "2026-10-22"}
    )
    assert r.status_code == 200
    assert r.json() == []


def test_horarios_disponiveis_ignores_inactive_block(client, bloco):
    client.put(f"/api/admin/blocos-horarios/{bloco['id']}", json={"ativo": False})
    r = client.get("/api/agendamentos/horarios-disponiveis", params={"data": QUARTA})
    assert r.json() == []


def test_horarios_disponiveis_overlapping_blocks_not_deduplicated(client, bloco):
    client.post(
        "/api/admin/blocos-horarios",
        json={"diaSemana": 3, "horaInicio": "09:00", "horaFim": "10:00"},
    )
    r = client.get("/api/agendamentos/horarios-disponiveis", params={"data": QUARTA})
    inicios = [s["horaInicio"] for s in r.json()]
    assert inicios == ["08:00", "09:00", "09:00"]


@pytest.mark.parametrize("params", [{}, {"data": "21/10/2026"}])
def test_horarios_disponiveis_requires_valid_date(client, params):
    r = client.get("/api/agendamentos/horarios-disponiveis", params=params)
    assert r.status_code == 400
    assert r.json()["error"] == "Dados inválidos"


def test_sunday_block_matches_sunday_date(client):
    client.post(
        "/api/admin/blocos-horarios",
        json={"diaSemana": 0, "horaInicio": "07:00", "horaFim": "08:00", "duracao": 30},
    )
    domingo = date(2026, 10, 25).isoformat()
    r = client.get("/api/agendamentos/horarios-disponiveis", params={"data": domingo})
    assert [s["horaInicio"] for s in r.json()] == ["07:00", "07:30"]


def test_cancelled_appointment_does_not_block_slot(client, aluno, bloco):
    ag = client.post(
        "/api/admin/agendamentos",
        json={
            "alunoId": aluno["id"],
            "dataAgendamento": QUARTA,
            "horaInicio": "08:00",
            "blocoHorarioId": bloco["id"],
        },
    ).json()
    client.post(f"/api/admin/agendamentos/{ag['id']}/cancelar")

    r = client.get("/api/agendamentos/horarios-disponiveis", params={"data": QUARTA})
    assert all(s["disponivel"] for s in r.json())
