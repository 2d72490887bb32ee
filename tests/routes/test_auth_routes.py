from fastapi.testclient import TestClient

from authors_api.auth import jwt_handler


def _login(client: TestClient, username: str, password: str):
    return client.post('/api/auth/login', json={'username': username, 'password': password})


def test_login_returns_bearer_token(client: TestClient, make_user) -> None:
    make_user(username='reader', password='correct horse battery')

    response = _login(client, 'reader', 'correct horse battery')

    assert response.status_code == 200
    body = response.json()
    assert body['token_type'] == 'bearer'
    assert body['expires_in'] == 3600
    assert jwt_handler.decode_access_token(body['access_token'])['sub'] == 'reader'


def test_login_rejects_wrong_password(client: TestClient, make_user) -> None:
    make_user(username='reader', password='correct horse battery')

    response = _login(client, 'reader', 'wrong password')

    assert response.status_code == 401
    assert response.json() == {'Message': 'Invalid username or password.'}
    assert response.headers['www-authenticate'] == 'Bearer'


def test_login_rejects_unknown_user(client: TestClient) -> None:
    response = _login(client, 'ghost', 'whatever')

    assert response.status_code == 401


def test_login_rejects_incomplete_body(client: TestClient) -> None:
    response = client.post('/api/auth/login', json={'username': 'reader'})

    assert response.status_code == 400
    assert 'password' in response.json()['Details']


def test_protected_route_accepts_valid_token(client: TestClient, make_user) -> None:
    make_user(username='reader', password='correct horse battery')
    token = _login(client, 'reader', 'correct horse battery').json()['access_token']

    response = client.get('/api/protected', headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == 200
    assert response.json()['username'] == 'reader'


def test_protected_route_rejects_missing_token(client: TestClient) -> None:
    response = client.get('/api/protected')

    assert response.status_code == 401
    assert response.json() == {'Message': 'Authorization must be: Bearer <token>.'}


def test_protected_route_rejects_wrong_scheme(client: TestClient) -> None:
    token = jwt_handler.create_access_token(subject='reader')

    response = client.get('/api/protected', headers={'Authorization': f'Basic {token}'})

    assert response.status_code == 401


def test_protected_route_rejects_malformed_token(client: TestClient) -> None:
    response = client.get('/api/protected', headers={'Authorization': 'Bearer not.a.token'})

    assert response.status_code == 401
    assert response.json() == {'Message': 'Invalid token.'}


def test_protected_route_rejects_expired_token(client: TestClient) -> None:
    token = jwt_handler.create_access_token(subject='reader', expires_minutes=-1)

    response = client.get('/api/protected', headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == 401
    assert response.json() == {'Message': 'Token has expired.'}


def test_me_returns_token_subject(client: TestClient) -> None:
    token = jwt_handler.create_access_token(subject='reader')

    response = client.get('/api/auth/me', headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == 200
    assert response.json() == {'username': 'reader'}


def test_root_reports_status(client: TestClient) -> None:
    assert client.get('/').json() == {'status': 'Authors API Running'}
