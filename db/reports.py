# db/reports.py
"""Summaries for the Team Admin analytics tabs, computed from query frames."""
import pandas as pd


def panchayath_hierarchy(panchayaths: pd.DataFrame, agents: pd.DataFrame) -> pd.DataFrame:
    """
    One row per panchayath with agent counts per role, plus a Total column.
    Panchayaths without agents are kept with zero counts.
    """
    if panchayaths.empty:
        return pd.DataFrame(columns=["Panchayath", "Total"])

    names = panchayaths.set_index("id")["name"]
    if agents.empty:
        out = pd.DataFrame({"Panchayath": names.values, "Total": 0})
        return out.sort_values("Panchayath").reset_index(drop=True)

    counts = (
        agents.groupby(["panchayath_id", "role"]).size()
        .unstack(fill_value=0)
        .reindex(names.index, fill_value=0)
    )
    counts["Total"] = counts.sum(axis=1)
    counts.insert(0, "Panchayath", names)
    return counts.sort_values("Panchayath").reset_index(drop=True)


def performance_summary(panchayaths: pd.DataFrame, agents: pd.DataFrame, activities: pd.DataFrame) -> pd.DataFrame:
    """
    Activity entries per panchayath and per agent over the fetched window,
    lowest performers first.
    """
    cols = ["Panchayath", "Agents", "Activities", "Per Agent"]
    if panchayaths.empty:
        return pd.DataFrame(columns=cols)

    names = panchayaths.set_index("id")["name"]
    agent_counts = agents.groupby("panchayath_id").size() if not agents.empty else pd.Series(dtype=int)

    if activities.empty or agents.empty:
        activity_counts = pd.Series(dtype=int)
    else:
        merged = activities.merge(agents[["id", "panchayath_id"]], left_on="agent_id", right_on="id")
        activity_counts = merged.groupby("panchayath_id").size()

    out = pd.DataFrame({
        "Panchayath": names,
        "Agents": agent_counts.reindex(names.index, fill_value=0).astype(int),
        "Activities": activity_counts.reindex(names.index, fill_value=0).astype(int),
    })
    out["Per Agent"] = (out["Activities"] / out["Agents"].where(out["Agents"] > 0)).fillna(0).round(2)
    return out.sort_values(["Per Agent", "Panchayath"]).reset_index(drop=True)[cols]


def response_counts(questions: pd.DataFrame, responses: pd.DataFrame) -> pd.DataFrame:
    if questions.empty:
        return pd.DataFrame(columns=["Question", "Responses"])
    counts = responses.groupby("question_id").size() if not responses.empty else pd.Series(dtype=int)
    out = pd.DataFrame({
        "Question": questions["question"].values,
        "Responses": counts.reindex(questions["id"].values, fill_value=0).astype(int).values,
    })
    return out.sort_values("Responses", ascending=False, kind="stable").reset_index(drop=True)
