REPORTS = "/api/v1/reports"


def _create_report(client, headers, project_id, text):
    response = client.post(f"{REPORTS}/project/{project_id}", json={"text": text}, headers=headers)
    assert response.status_code == 201
    return response.json()


def test_create_report_uses_project_id_key(client, auth_headers, project):
    report = _create_report(client, auth_headers, project["id"], "hello")
    assert report["projectId"] == project["id"]
    assert report["text"] == "hello"
    assert "project_id" not in report


def test_create_report_for_missing_project(client, auth_headers, services):
    response = client.post(f"{REPORTS}/project/missing-id", json={"text": "text"}, headers=auth_headers)
    assert response.status_code == 404
    assert len(services.db.reports) == 0


def test_create_report_rejects_blank_text(client, auth_headers, project):
    response = client.post(
        f"{REPORTS}/project/{project['id']}", json={"text": "   "}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["detail"] == ["Key 'text' must be a non-empty string"]


def test_list_reports_for_project(client, auth_headers, project):
    other = client.post(
        "/api/v1/projects", json={"name": "Beta"}, headers=auth_headers
    ).json()
    first = _create_report(client, auth_headers, project["id"], "one")
    _create_report(client, auth_headers, other["id"], "other")
    second = _create_report(client, auth_headers, project["id"], "two")

    response = client.get(f"{REPORTS}/project/{project['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == [first, second]


def test_list_reports_for_missing_project(client, auth_headers):
    response = client.get(f"{REPORTS}/project/missing", headers=auth_headers)
    assert response.status_code == 404


def test_update_round_trip(client, auth_headers, project):
    report = _create_report(client, auth_headers, project["id"], "hello")
    response = client.put(f"{REPORTS}/{report['id']}", json={"text": "world"}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["text"] == "world"

    response = client.get(f"{REPORTS}/{report['id']}", headers=auth_headers)
    assert response.json()["text"] == "world"


def test_update_requires_text(client, auth_headers, project):
    report = _create_report(client, auth_headers, project["id"], "hello")
    response = client.put(f"{REPORTS}/{report['id']}", json={}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == ["Key 'text' is required"]


def test_unknown_report(client, auth_headers):
    assert client.get(f"{REPORTS}/missing", headers=auth_headers).status_code == 404
    assert client.put(f"{REPORTS}/missing", json={"text": "x"}, headers=auth_headers).status_code == 404
    assert client.delete(f"{REPORTS}/missing", headers=auth_headers).status_code == 404


def test_delete_report(client, auth_headers, project):
    report = _create_report(client, auth_headers, project["id"], "hello")
    assert client.delete(f"{REPORTS}/{report['id']}", headers=auth_headers).status_code == 204
    assert client.get(f"{REPORTS}/{report['id']}", headers=auth_headers).status_code == 404


def test_deleting_project_removes_its_reports(client, auth_headers, project):
    report = _create_report(client, auth_headers, project["id"], "hello")
    client.delete(f"/api/v1/projects/{project['id']}", headers=auth_headers)
    assert client.get(f"{REPORTS}/{report['id']}", headers=auth_headers).status_code == 404


def test_special_search_without_matches_is_404(client, auth_headers, project):
    _create_report(client, auth_headers, project["id"], "nothing repeats")
    response = client.get(f"{REPORTS}/special", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "No reports found"


def test_special_search_returns_matches(client, auth_headers, project):
    _create_report(client, auth_headers, project["id"], "plain")
    match = _create_report(client, auth_headers, project["id"], "Risk, risk, risk everywhere")
    response = client.get(f"{REPORTS}/special", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == [match]
