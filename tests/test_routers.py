def _seed(client):
    for label in ("CO1: Fundamentals", "CO2: Processes"):
        assert client.post("/course-outcomes/", json={"label": label}).status_code == 201
    client.post("/questions/", json={
        "text": "Define a stack\nDefine a queue\nState Little's law",
        "course_outcome": "CO1: Fundamentals",
        "marks": 2,
    })
    client.post("/questions/", json={
        "text": "Define a process\nList process states",
        "course_outcome": "CO2: Processes",
        "marks": 2,
    })


def test_root(client):
    assert client.get("/").json() == {"status": "Online"}


def test_course_outcome_lifecycle(client):
    _seed(client)
    listed = client.get("/course-outcomes/").json()
    assert [(o["code"], o["question_count"]) for o in listed] == [("CO1", 3), ("CO2", 2)]

    dup = client.post("/course-outcomes/", json={"label": "CO2: Processes"})
    assert dup.status_code == 409
    assert dup.json()["detail"]["error_code"] == "DUPLICATE_COURSE_OUTCOME"

    resp = client.delete("/course-outcomes/CO2: Processes")
    assert resp.json() == {"label": "CO2: Processes", "questions_removed": 2}
    assert client.get("/questions/", params={"course_outcome": "CO2: Processes"}).json() == []

    assert client.delete("/course-outcomes/CO9").status_code == 404


def test_bulk_add_and_stats(client):
    _seed(client)
    stats = client.get("/questions/stats").json()
    assert stats["total"] == 5
    assert stats["by_marks"]["2"] == 5
    assert stats["course_outcomes"] == 2

    questions = client.get("/questions/", params={"marks": 2}).json()
    assert [q["id"] for q in questions] == [1, 2, 3, 4, 5]
    assert questions[0]["cognitive_level"] == "L1"


def test_add_with_unknown_outcome(client):
    resp = client.post("/questions/", json={"text": "Define X", "course_outcome": "CO7", "marks": 2})
    assert resp.status_code == 404


def test_add_with_invalid_marks(client):
    client.post("/course-outcomes/", json={"label": "CO1"})
    resp = client.post("/questions/", json={"text": "Define X", "course_outcome": "CO1", "marks": 5})
    assert resp.status_code == 422


def test_edit_and_delete_question(client):
    _seed(client)
    resp = client.put("/questions/2", json={
        "text": "Design a queue", "course_outcome": "CO1: Fundamentals", "marks": 16,
    })
    assert resp.status_code == 200
    assert resp.json()["cognitive_level"] == "L6"

    assert client.delete("/questions/2").status_code == 204
    assert client.delete("/questions/2").status_code == 404
    assert client.put("/questions/99", json={
        "text": "Define X", "course_outcome": "CO1: Fundamentals", "marks": 2,
    }).status_code == 404


def test_clear_questions(client):
    _seed(client)
    assert client.delete("/questions/").status_code == 204
    assert client.get("/questions/stats").json()["total"] == 0


def test_grouped(client):
    _seed(client)
    grouped = client.get("/questions/grouped").json()
    assert list(grouped) == ["CO1: Fundamentals", "CO2: Processes"]
    assert len(grouped["CO1: Fundamentals"]["2"]) == 3


def test_classify_endpoint(client):
    resp = client.post("/questions/classify", json={"text": "Compare and contrast TCP and UDP"})
    body = resp.json()
    assert body["cognitive_level"] == "L4"
    assert body["display_name"] == "Analyze"
    assert body["confidence"] == 60


def test_check_endpoint(client):
    _seed(client)
    ok = client.post("/generation/check", json={"cells": [{"marks": 2, "count": 4}]}).json()
    assert ok == {"ok": True, "shortage": None}

    short = client.post("/generation/check", json={"cells": [{"marks": 8, "count": 1}]}).json()
    assert short["ok"] is False
    assert short["shortage"]["available"] == 0


def test_check_endpoint_rejects_invalid_requests(client):
    _seed(client)
    empty = client.post("/generation/check", json={"cells": [{"marks": 2, "count": 0}]})
    assert empty.status_code == 422
    assert empty.json()["detail"]["error_code"] == "INVALID_REQUEST"

    unknown = client.post("/generation/check", json={
        "cells": [{"course_outcome": "CO9: Networks", "marks": 2, "count": 1}],
    })
    assert unknown.status_code == 422
    assert unknown.json()["detail"]["error_code"] == "INVALID_REQUEST"


def test_generate_paper_endpoint(client):
    _seed(client)
    resp = client.post("/generation/generate-paper", json={
        "cells": [{"marks": 2, "count": 4}],
        "include_alternatives": True,
    })
    assert resp.status_code == 200
    paper = resp.json()
    assert paper["total_marks"] == 8
    (part_a,) = paper["sections"]
    assert part_a["label"] == "Part A"
    assert [q["number"] for q in part_a["questions"]] == [1, 2, 3, 4]
    assert len({q["question"]["id"] for q in part_a["questions"]}) == 4


def test_generate_paper_errors(client):
    _seed(client)
    empty = client.post("/generation/generate-paper", json={"cells": [{"marks": 2, "count": 0}]})
    assert empty.status_code == 422
    assert empty.json()["detail"]["error_code"] == "INVALID_REQUEST"

    short = client.post("/generation/generate-paper", json={
        "cells": [{"course_outcome": "CO2: Processes", "marks": 2, "count": 3}],
    })
    assert short.status_code == 409
    assert short.json()["detail"]["shortage"] == {
        "course_outcome": "CO2: Processes", "marks": 2, "available": 2, "requested": 3,
    }
