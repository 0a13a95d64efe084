from fastapi import status

NEW_SCENARIO = {
    "title": "Hiring Manager - Product Manager",
    "interview_stage": "hiring-manager",
    "industry": "Fintech",
    "job_role": "Product Manager",
    "company_background": "Digital bank in Kuala Lumpur",
    "role_description": "Own the payments roadmap",
    "candidate_background": "Five years in product",
    "key_objectives": "Assess prioritisation",
    "interviewer_name": "Daniel Lee",
    "interviewer_title": "Head of Product",
    "interviewer_style": "direct",
    "personality_traits": "pragmatic, data-driven",
}


def test_list_and_filter_scenarios(client, user_headers, scenario):
    response = client.get("/api/practice/scenarios", headers=user_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["meta"]["total"] == 1

    response = client.get("/api/practice/scenarios", params={"industry": "Fintech"}, headers=user_headers)
    assert response.json()["data"] == []

    response = client.get(
        "/api/practice/scenarios",
        params={"interview_stage": "phone-screening", "status": "active"},
        headers=user_headers,
    )
    assert [s["id"] for s in response.json()["data"]] == [scenario.id]


def test_only_admins_manage_scenarios(client, user_headers, admin_headers):
    response = client.post("/api/practice/scenarios", json=NEW_SCENARIO, headers=user_headers)
    assert response.status_code == status.HTTP_403_FORBIDDEN

    response = client.post("/api/practice/scenarios", json=NEW_SCENARIO, headers=admin_headers)
    assert response.status_code == status.HTTP_201_CREATED
    scenario_id = response.json()["data"]["id"]

    response = client.put(
        f"/api/practice/scenarios/{scenario_id}",
        json={"status": "draft"},
        headers=admin_headers,
    )
    assert response.json()["data"]["status"] == "draft"

    response = client.delete(f"/api/practice/scenarios/{scenario_id}", headers=admin_headers)
    assert response.status_code == status.HTTP_200_OK

    response = client.get(f"/api/practice/scenarios/{scenario_id}", headers=user_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND
