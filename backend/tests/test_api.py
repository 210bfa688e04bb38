from decimal import Decimal

from clinic.core.config import settings


async def create(client, url, payload):
    resp = await client.post(url, json=payload)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["code"] == settings.SUCCESS_CODE
    return body["message"]


async def test_root(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert settings.PROJECT_NAME in resp.json()["message"]


async def test_booking_flow(client):
    dept = await create(client, "/departments", {"name": "Pediatrics", "description": "Child healthcare"})
    doctor = await create(client, "/doctors", {
        "first_name": "Chinedu",
        "last_name": "Okeke",
        "email": "chinedu.okeke@example.com",
        "department_id": dept["department_id"],
    })
    patient = await create(client, "/patients", {"first_name": "Damilola", "last_name": "Adebisi", "gender": "Female"})
    appointment = await create(client, "/appointments", {
        "patient_id": patient["patient_id"],
        "doctor_id": doctor["doctor_id"],
        "appointment_datetime": "2025-09-20T10:00:00",
        "reason": "Regular check-up",
    })
    appointment_id = appointment["appointment_id"]
    assert appointment["status"] == "Scheduled"
    assert appointment["duration_minutes"] == 30

    treatment = await create(client, "/treatments", {"code": "T001", "name": "General Consultation", "price": "1500.00"})
    link = await create(client, f"/appointments/{appointment_id}/treatments", {
        "treatment_id": treatment["treatment_id"],
        "price_at_time": "1500.00",
    })
    assert link["quantity"] == 1

    medication = await create(client, "/medications", {"name": "Paracetamol", "brand": "Emzor"})
    prescription = await create(client, f"/appointments/{appointment_id}/prescriptions", {"notes": "After meals"})
    await create(client, f"/prescriptions/{prescription['prescription_id']}/items", {
        "medication_id": medication["medication_id"],
        "dosage": "1 tablet twice daily",
        "duration_days": 5,
    })

    payment = await create(client, f"/appointments/{appointment_id}/payments", {"amount": "1500.00", "method": "Cash"})
    assert Decimal(str(payment["amount"])) == Decimal("1500.00")

    resp = await client.get(f"/patients/{patient['patient_id']}/appointments")
    assert [a["appointment_id"] for a in resp.json()["message"]] == [appointment_id]

    resp = await client.get("/appointments", params={"doctor_id": doctor["doctor_id"], "status": "Scheduled"})
    assert len(resp.json()["message"]) == 1

    resp = await client.put(f"/appointments/{appointment_id}", json={"status": "Completed"})
    assert resp.json()["message"]["status"] == "Completed"

    # 删除患者后, 预约及其下属记录全部消失
    resp = await client.delete(f"/patients/{patient['patient_id']}")
    assert resp.status_code == 200
    resp = await client.get(f"/appointments/{appointment_id}")
    assert resp.status_code == 404
    resp = await client.get(f"/payments/{payment['payment_id']}")
    assert resp.status_code == 404
    resp = await client.get(f"/prescriptions/{prescription['prescription_id']}")
    assert resp.status_code == 404

    # 目录数据不再被引用, 可以删除
    resp = await client.delete(f"/treatments/{treatment['treatment_id']}")
    assert resp.status_code == 200


async def test_not_found(client):
    resp = await client.get("/doctors/999")
    assert resp.status_code == 404
    body = resp.json()
    assert body["code"] == settings.NOT_FOUND_CODE
    assert body["message"]["error"]


async def test_duplicate_email_conflict(client):
    payload = {"first_name": "Amina", "last_name": "Mohammed", "email": "amina.mohammed@example.com"}
    await create(client, "/doctors", payload)

    resp = await client.post("/doctors", json=payload)
    assert resp.status_code == 409
    assert resp.json()["code"] == settings.CONSTRAINT_VIOLATION_CODE


async def test_unknown_reference_conflict(client):
    resp = await client.post("/doctors", json={
        "first_name": "Amina", "last_name": "Mohammed", "email": "amina@example.com", "department_id": 42,
    })
    assert resp.status_code == 409
    assert resp.json()["code"] == settings.CONSTRAINT_VIOLATION_CODE


async def test_restricted_delete(client):
    doctor = await create(client, "/doctors", {"first_name": "Amina", "last_name": "Mohammed", "email": "amina@example.com"})
    patient = await create(client, "/patients", {"first_name": "Damilola", "last_name": "Adebisi"})
    await create(client, "/appointments", {
        "patient_id": patient["patient_id"],
        "doctor_id": doctor["doctor_id"],
        "appointment_datetime": "2025-09-20T10:00:00",
    })

    resp = await client.delete(f"/doctors/{doctor['doctor_id']}")
    assert resp.status_code == 409
    assert resp.json()["code"] == settings.REFERENTIAL_RESTRICT_CODE

    resp = await client.get(f"/doctors/{doctor['doctor_id']}")
    assert resp.status_code == 200


async def test_department_delete_detaches_doctors(client):
    dept = await create(client, "/departments", {"name": "General Medicine"})
    doctor = await create(client, "/doctors", {
        "first_name": "Amina", "last_name": "Mohammed", "email": "amina@example.com", "department_id": dept["department_id"],
    })

    resp = await client.delete(f"/departments/{dept['department_id']}")
    assert resp.status_code == 200

    resp = await client.get(f"/doctors/{doctor['doctor_id']}")
    assert resp.json()["message"]["department_id"] is None


async def test_doctor_specialties(client):
    doctor = await create(client, "/doctors", {"first_name": "Amina", "last_name": "Mohammed", "email": "amina@example.com"})
    specialty = await create(client, "/specialties", {"name": "General Practice"})
    url = f"/doctors/{doctor['doctor_id']}/specialties"

    await create(client, url, {"specialty_id": specialty["specialty_id"]})
    resp = await client.post(url, json={"specialty_id": specialty["specialty_id"]})
    assert resp.status_code == 409

    resp = await client.get(url)
    assert [s["specialty_id"] for s in resp.json()["message"]] == [specialty["specialty_id"]]

    resp = await client.delete(f"{url}/{specialty['specialty_id']}")
    assert resp.status_code == 200
    resp = await client.get(url)
    assert resp.json()["message"] == []


async def test_validation_error(client):
    resp = await client.post("/patients", json={"first_name": "Damilola", "last_name": "Adebisi", "gender": "Unknown"})
    assert resp.status_code == 422
    assert resp.json()["code"] == settings.REQ_ERROR_CODE

    resp = await client.post("/doctors", json={"first_name": "Amina", "last_name": "Mohammed"})
    assert resp.status_code == 422


async def test_user_response_hides_password_hash(client):
    user = await create(client, "/users", {"username": "frontdesk", "password": "pw", "full_name": "Front Desk"})
    assert user["role"] == "Reception"
    assert "password" not in user
    assert "password_hash" not in user
