from treasure_map.services.location_provider import StaticLocationProvider
from treasure_map.services.place_search_client import MockPlaceSearchClient


def test_search_shows_transient_results(client):
    r = client.post('/treasures/search', json={'query': 'pizza'})
    assert r.status_code == 200
    body = r.json()
    assert body['status'] == 'ok'
    places = body['data']['places']
    assert len(places) == 2

    map_state = client.get('/treasures/map').json()['data']
    assert map_state['active_layer'] == 'transient'
    assert [a['title'] for a in map_state['annotations']] == [p['name'] for p in places]
    assert map_state['region']['span_meters'] == 1000.0

    # saved rows are untouched by search results
    rows = client.get('/treasures').json()['data']['rows']
    assert len(rows) == 3


def test_return_to_saved_after_search(client):
    client.post('/treasures/search', json={'query': 'pizza'})
    r = client.post('/treasures/map/saved')
    data = r.json()['data']
    assert data['active_layer'] == 'saved'
    assert [a['title'] for a in data['annotations']] == ["McDonald's", "Starbucks", "Tim Hortons"]


def test_empty_search_query(client):
    r = client.post('/treasures/search', json={'query': '   '})
    assert r.status_code == 400
    assert r.json()['error_code'] == 'EMPTY_INPUT'


def test_search_failure_reported_in_envelope(client, screen):
    screen.search_client = MockPlaceSearchClient(fail_with="offline")
    r = client.post('/treasures/search', json={'query': 'pizza'})
    assert r.status_code == 200
    body = r.json()
    assert body['status'] == 'error'
    assert body['data'] is None
    assert client.get('/treasures/map').json()['data']['active_layer'] == 'saved'


def test_location_update_runs_nearby_search(client, search_client):
    r = client.post('/treasures/location', json={'latitude': 43.65, 'longitude': -79.38})
    assert r.status_code == 200
    assert r.json()['data']['query'] == 'restaurant'
    assert search_client.queries == ['restaurant']

    region = client.get('/treasures/map').json()['data']['region']
    assert region['center'] == {'latitude': 43.65, 'longitude': -79.38}


def test_locate_uses_provider(client, search_client):
    r = client.post('/treasures/locate')
    assert r.json()['status'] == 'ok'
    assert search_client.queries == ['restaurant']


def test_locate_denied(client, screen, search_client):
    screen.location_provider = StaticLocationProvider(authorized=False)
    r = client.post('/treasures/locate')
    assert r.json()['status'] == 'error'
    assert search_client.queries == []
