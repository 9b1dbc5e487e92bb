import pandas as pd

from db.reports import panchayath_hierarchy, performance_summary, response_counts

PANCHAYATHS = pd.DataFrame([
    {"id": 1, "name": "Kuttanad"},
    {"id": 2, "name": "Aroor"},
    {"id": 3, "name": "Mannar"},
])

AGENTS = pd.DataFrame([
    {"id": "a1", "name": "A", "role": "coordinator", "panchayath_id": 1},
    {"id": "a2", "name": "B", "role": "pro", "panchayath_id": 1},
    {"id": "a3", "name": "C", "role": "pro", "panchayath_id": 1},
    {"id": "a4", "name": "D", "role": "pro", "panchayath_id": 2},
])


def test_hierarchy_counts_roles():
    table = panchayath_hierarchy(PANCHAYATHS, AGENTS)
    rows = table.set_index("Panchayath")
    assert list(table["Panchayath"]) == ["Aroor", "Kuttanad", "Mannar"]
    assert rows.loc["Kuttanad", "pro"] == 2
    assert rows.loc["Kuttanad", "Total"] == 3
    assert rows.loc["Mannar", "Total"] == 0


def test_hierarchy_without_agents():
    table = panchayath_hierarchy(PANCHAYATHS, pd.DataFrame())
    assert table["Total"].sum() == 0
    assert len(table) == 3


def test_hierarchy_without_panchayaths():
    assert panchayath_hierarchy(pd.DataFrame(), AGENTS).empty


def test_performance_lowest_first():
    activities = pd.DataFrame([
        {"id": 1, "agent_id": "a1", "activity_date": "2026-10-01"},
        {"id": 2, "agent_id": "a4", "activity_date": "2026-10-01"},
        {"id": 3, "agent_id": "a4", "activity_date": "2026-10-02"},
    ])
    table = performance_summary(PANCHAYATHS, AGENTS, activities)
    assert list(table["Panchayath"]) == ["Mannar", "Kuttanad", "Aroor"]

    rows = table.set_index("Panchayath")
    assert rows.loc["Kuttanad", "Agents"] == 3
    assert rows.loc["Kuttanad", "Activities"] == 1
    assert rows.loc["Kuttanad", "Per Agent"] == 0.33
    assert rows.loc["Aroor", "Per Agent"] == 2.0
    assert rows.loc["Mannar", "Per Agent"] == 0


def test_performance_without_activity():
    table = performance_summary(PANCHAYATHS, AGENTS, pd.DataFrame())
    assert table["Activities"].sum() == 0


def test_response_counts():
    questions = pd.DataFrame([
        {"id": "q1", "question": "How was training?"},
        {"id": "q2", "question": "Any issues?"},
    ])
    responses = pd.DataFrame([
        {"id": 1, "question_id": "q2"},
        {"id": 2, "question_id": "q2"},
    ])
    table = response_counts(questions, responses)
    assert table.to_dict("records") == [
        {"Question": "Any issues?", "Responses": 2},
        {"Question": "How was training?", "Responses": 0},
    ]
