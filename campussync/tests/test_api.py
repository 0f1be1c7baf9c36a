from campussync.db import get_conn


def test_health_and_version(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json().get("status") == "ok"

    v = client.get("/version")
    assert v.status_code == 200
    assert v.json().get("app") == "campussync-api"


def test_class_routes_and_error_mapping(client):
    res = client.post("/api/class/create", json={"class_name": "Grade 8", "academic_year": "2024-2025"})
    assert res.status_code == 201
    cid = res.json()["id"]

    assert client.get(f"/api/class/{cid}").json()["class_name"] == "Grade 8"
    assert [c["id"] for c in client.get("/api/class/list").json()] == [cid]

    missing = client.get("/api/class/9999")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "class_not_found"

    res = client.post(f"/api/class/{cid}/update", json={"class_name": "Grade 8A", "academic_year": "2024-2025"})
    assert res.status_code == 200
    assert res.json()["item"]["class_name"] == "Grade 8A"


def test_student_step_routes(client):
    cid = client.post("/api/class/create", json={"class_name": "Grade 9", "academic_year": "2024-2025"}).json()["id"]
    core = {
        "gr_number": "GR-900",
        "full_name": "Dev Rao",
        "gender": "M",
        "mother_name": "Lata Rao",
        "father_name": "Anil Rao",
        "class_id": cid,
    }
    res = client.post("/api/student/step1", json=core)
    assert res.status_code == 200
    sid = res.json()["id"]

    assert client.post(f"/api/student/{sid}/step2", json={"city": "Nashik"}).status_code == 200
    assert client.post(f"/api/student/{sid}/step3", json={"blood_group": "O+"}).status_code == 200
    assert client.post(f"/api/student/{sid}/step4", json={}).status_code == 200

    s = client.get(f"/api/student/{sid}").json()
    assert (s["city"], s["blood_group"], s["class_name"]) == ("Nashik", "O+", "Grade 9")

    bad = client.post("/api/student/step1", json={**core, "gr_number": "GR-901", "class_id": 4242})
    assert bad.status_code == 400
    assert bad.json()["detail"] == "Class with id 4242 does not exist"

    assert client.post("/api/student/9999/step2", json={}).status_code == 404


def test_mutations_are_audited(client):
    client.post("/api/enquiry/create", json={
        "student_name": "Ira", "parent_name": "Sam", "phone": "1", "source": "web",
    })
    client.post("/api/class/9999/delete")
    with get_conn() as conn:
        rows = conn.execute("SELECT action, result, err_msg FROM operation_log ORDER BY id").fetchall()
    assert [(r["action"], r["result"]) for r in rows] == [("CREATE_ENQUIRY", "OK"), ("DELETE_CLASS", "ERROR")]
    assert rows[1]["err_msg"] == "class_not_found"

    res = client.get("/api/logs/search", params={"action": "CREATE_ENQUIRY"})
    assert res.json()["total"] == 1


def test_upload_and_fetch_document(client):
    res = client.post("/api/student/upload", json={"id": 5, "file_name": "tc.pdf", "file_bytes": [37, 80, 68, 70]})
    assert res.status_code == 200
    assert res.json()["path"].endswith("5_tc.pdf")
    url = client.get("/api/student/document/base64", params={"file_name": "5_tc.pdf"}).json()["data_url"]
    assert url == "data:application/pdf;base64,JVBERg=="


def test_image_file_route(client):
    client.post("/api/image/save", json={"filename": "logo.png", "data": [1, 2, 3]})
    r = client.get("/api/image/file/logo.png")
    assert r.status_code == 200
    assert r.content == bytes([1, 2, 3])
    assert client.get("/api/image/file/none.png").status_code == 404
