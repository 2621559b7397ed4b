import pytest
from fastapi.testclient import TestClient

from app.core.exceptions import StorageError
from app.dependencies import get_student_service
from app.main import app
from app.repositories.student import InMemoryStudentRepository, JsonFileStudentRepository
from app.schemas.student import Student
from app.services.student import StudentService

BASE_URL = "/api/v1/students"


@pytest.fixture
def client_for():
    """Build a TestClient whose StudentService uses the given repository"""
    def _make(repository):
        service = StudentService(repository)
        app.dependency_overrides[get_student_service] = lambda: service
        return TestClient(app)
    yield _make
    app.dependency_overrides.clear()

@pytest.fixture
def client(client_for, initial_students):
    return client_for(InMemoryStudentRepository(initial_students))


def test_root_and_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    body = client.get("/").json()
    assert "version" in body

def test_list_students(client):
    response = client.get(BASE_URL)

    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "name": "Andi", "age": 21},
        {"id": 2, "name": "Siti", "age": 22},
    ]

def test_get_student(client):
    response = client.get(f"{BASE_URL}/2")

    assert response.status_code == 200
    assert response.json() == {"id": 2, "name": "Siti", "age": 22}

def test_get_student_not_found(client):
    response = client.get(f"{BASE_URL}/999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Student 999 not found"

def test_create_student_ignores_client_id(client):
    response = client.post(BASE_URL, json={"id": 1, "name": "Bayu", "age": 20})

    assert response.status_code == 201
    assert response.json() == {"id": 3, "name": "Bayu", "age": 20}
    assert len(client.get(BASE_URL).json()) == 3

@pytest.mark.parametrize("payload", [
    {"name": "", "age": 20},
    {"name": "   ", "age": 20},
    {"name": "Bayu", "age": -1},
    {"name": "Bayu"},
])
def test_create_student_invalid_payload(client, payload):
    response = client.post(BASE_URL, json=payload)

    assert response.status_code == 422

def test_update_student(client):
    response = client.put(f"{BASE_URL}/2", json={"name": "Siti Baru", "age": 23})

    assert response.status_code == 200
    assert response.json() == {"id": 2, "name": "Siti Baru", "age": 23}
    assert client.get(BASE_URL).json()[1] == {"id": 2, "name": "Siti Baru", "age": 23}

def test_update_student_not_found(client):
    response = client.put(f"{BASE_URL}/999", json={"name": "X", "age": 30})

    assert response.status_code == 404

def test_delete_student(client):
    response = client.delete(f"{BASE_URL}/2")

    assert response.status_code == 204
    assert client.get(BASE_URL).json() == [{"id": 1, "name": "Andi", "age": 21}]

def test_delete_student_not_found(client):
    assert client.delete(f"{BASE_URL}/999").status_code == 404

def test_storage_error_maps_to_500(client_for, mock_repo):
    mock_repo.get_all.side_effect = StorageError("disk gone")
    client = client_for(mock_repo)

    for response in (
        client.get(BASE_URL),
        client.get(f"{BASE_URL}/1"),
        client.post(BASE_URL, json={"name": "Bayu", "age": 20}),
        client.put(f"{BASE_URL}/1", json={"name": "Bayu", "age": 20}),
        client.delete(f"{BASE_URL}/1"),
    ):
        assert response.status_code == 500
        assert response.json() == {"detail": "Storage unavailable"}

def test_json_backed_api_flow(client_for, tmp_path):
    path = tmp_path / "students.json"
    client = client_for(JsonFileStudentRepository(path))

    client.post(BASE_URL, json={"name": "Andi", "age": 21})
    client.post(BASE_URL, json={"name": "Siti", "age": 22})
    client.delete(f"{BASE_URL}/2")
    created = client.post(BASE_URL, json={"name": "Bayu", "age": 20}).json()

    assert created["id"] == 2
    assert JsonFileStudentRepository(path).get_all() == [
        Student(id=1, name="Andi", age=21),
        Student(id=2, name="Bayu", age=20),
    ]
