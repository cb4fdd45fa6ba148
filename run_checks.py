import os

os.environ.setdefault("USE_MOCK_DB", "true")
os.environ.setdefault("MOCK_DB_PATH", "./mock_db.json")

from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)

print('ROOT:')
print(client.get('/').json())

print('\nHEALTH:')
print(client.get('/health').json())

print('\nDB HEALTH:')
resp = client.get('/health/db')
print(resp.status_code, resp.json())

print('\nMARKERS:')
print(client.get('/map/markers').json())

print('\nRISK (Delhi East / crime / 2024-03-10):')
resp = client.get('/risk', params={'district': 'Delhi East', 'family': 'crime', 'date': '2024-03-10'})
print(resp.status_code, resp.json())
