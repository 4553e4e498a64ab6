from models import db, Category, Store


def _search(client, **params):
    resp = client.get('/api/v1/items/search', query_string=params)
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()['data']


def test_no_filters_returns_everything_newest_first(client, catalog):
    first = catalog(name='First')
    second = catalog(name='Second')
    third = catalog(name='Third')
    names = [i['name'] for i in _search(client)]
    assert names == ['Third', 'Second', 'First']
    assert {i['id'] for i in _search(client)} == {first.id, second.id, third.id}


def test_results_carry_category_and_store(client, catalog):
    catalog()
    hit = _search(client)[0]
    assert hit['category']['name'] == 'Electronics'
    assert hit['store']['name'] == 'TechCo'


def test_price_bounds_are_conjoined(client, catalog):
    catalog(name='Cheap', price=10)
    catalog(name='Mid', price=50)
    catalog(name='Pricey', price=200)
    names = [i['name'] for i in _search(client, min_price=25, max_price=100)]
    assert names == ['Mid']


def test_price_bounds_are_inclusive(client, catalog):
    catalog(name='Edge', price=50)
    assert len(_search(client, min_price=50, max_price=50)) == 1


def test_min_above_max_is_empty_not_error(client, catalog):
    catalog(price=50)
    assert _search(client, min_price=100, max_price=10) == []


def test_in_stock_only_excludes_zero_stock(client, catalog):
    catalog(name='Stocked', stock=3)
    catalog(name='Empty', stock=0)
    assert [i['name'] for i in _search(client, in_stock_only='true')] == ['Stocked']
    assert len(_search(client)) == 2


def test_query_is_case_insensitive_substring(client, catalog):
    catalog(name='Blue Widget')
    catalog(name='Gizmo')
    assert [i['name'] for i in _search(client, query='WIDG')] == ['Blue Widget']


def test_blank_query_is_ignored(client, catalog):
    catalog(name='A')
    catalog(name='B')
    assert len(_search(client, query='   ')) == 2


def test_wildcards_match_literally(client, catalog):
    catalog(name='100% cotton')
    catalog(name='1000 cotton')
    assert [i['name'] for i in _search(client, query='100%')] == ['100% cotton']


def test_category_and_store_filters(client, catalog):
    other_cat = Category(name='Books')
    other_store = Store(name='Shelf', owner_email='s@shelf.example')
    db.session.add_all([other_cat, other_store])
    db.session.commit()
    catalog(name='Widget')
    catalog(name='Novel', category_id=other_cat.id, store_id=other_store.id)
    assert [i['name'] for i in _search(client, category_id=other_cat.id)] == ['Novel']
    assert [i['name'] for i in _search(client, store_id=catalog.store.id)] == ['Widget']


def test_limit_and_offset(client, catalog):
    for n in range(5):
        catalog(name=f'Item {n}')
    page = _search(client, limit=2, offset=1)
    assert [i['name'] for i in page] == ['Item 3', 'Item 2']


def test_invalid_paging_rejected(client):
    assert client.get('/api/v1/items/search?limit=0').status_code == 400
    assert client.get('/api/v1/items/search?offset=-1').status_code == 400
    assert client.get('/api/v1/items/search?min_price=-5').status_code == 400
    assert client.get('/api/v1/items/search?category_id=abc').status_code == 400
    huge = 10**20
    assert client.get(f'/api/v1/items/search?limit={huge}').status_code == 400
    assert client.get(f'/api/v1/items/search?offset={huge}').status_code == 400
    assert client.get(f'/api/v1/items/search?category_id={huge}').status_code == 400
    assert client.get(f'/api/v1/items/search?store_id={huge}').status_code == 400
    assert client.get('/api/v1/items/search?limit=101').status_code == 400


def test_item_with_missing_category_is_excluded(client, catalog):
    catalog(name='Orphan', category_id=9999)
    catalog(name='Widget')
    assert [i['name'] for i in _search(client)] == ['Widget']
    assert client.get('/api/v1/items/search').get_json()['status'] == 'success'


def test_get_item(client, catalog):
    item = catalog()
    resp = client.get(f'/api/v1/items/{item.id}')
    assert resp.status_code == 200
    assert resp.get_json()['data']['store']['id'] == catalog.store.id
    missing = client.get('/api/v1/items/9999')
    assert missing.status_code == 404
    assert missing.get_json()['message'] == 'Item with id 9999 not found'


def test_items_by_category_and_store(client, catalog):
    catalog(name='Widget')
    catalog(name='Gadget')
    by_cat = client.get(f'/api/v1/categories/{catalog.category.id}/items').get_json()['data']
    by_store = client.get(f'/api/v1/stores/{catalog.store.id}/items').get_json()['data']
    assert [i['name'] for i in by_cat] == ['Gadget', 'Widget']
    assert [i['name'] for i in by_store] == ['Gadget', 'Widget']
    assert client.get('/api/v1/categories/9999/items').get_json()['data'] == []


def test_page_size_upper_bound_accepted(client, catalog):
    catalog()
    assert len(_search(client, limit=100)) == 1


def test_huge_item_id_in_path_is_not_found(client):
    assert client.get('/api/v1/items/100000000000000000000').status_code == 404
    assert client.get('/api/v1/categories/100000000000000000000/items').status_code == 404
