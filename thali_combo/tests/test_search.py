from thali_combo.menu.models import Thali
from thali_combo.menu.search import search_menu

SAMPLE_THALIS = [
    {"name": "Rajasthani Thali", "items": ["Dal Baati", "churma", "papad"], "price": 250, "isVeg": True},
    {"name": "Chicken Thali", "items": ["butter chicken", "naan"], "price": 320, "isVeg": False},
    {"name": "Dal Special", "items": ["rice", "roti"], "price": 150, "isVeg": True},
    {"name": "Gujarati Thali", "items": ["dhokla", "kadhi", "mOOng DAL"], "price": 200, "isVeg": True},
]


def test_search_matches_name_or_any_item():
    result = search_menu(SAMPLE_THALIS, "dal")
    assert [t["name"] for t in result] == ["Rajasthani Thali", "Dal Special", "Gujarati Thali"]


def test_search_is_case_insensitive():
    assert search_menu(SAMPLE_THALIS, "DAL") == search_menu(SAMPLE_THALIS, "dal")
    assert search_menu(SAMPLE_THALIS, "Chicken") == [SAMPLE_THALIS[1]]


def test_search_returns_original_records():
    result = search_menu(SAMPLE_THALIS, "naan")
    assert result == [SAMPLE_THALIS[1]]
    assert result[0] is SAMPLE_THALIS[1]


def test_search_empty_query_matches_all():
    assert search_menu(SAMPLE_THALIS, "") == SAMPLE_THALIS


def test_search_no_match():
    assert search_menu(SAMPLE_THALIS, "biryani") == []


def test_search_accepts_models():
    thalis = [
        Thali(name="Bengali Thali", items=["shukto", "mishti doi"], price=280, is_veg=False),
        Thali(name="Punjabi Thali", items=["sarson ka saag"], price=260, is_veg=True),
    ]
    assert search_menu(thalis, "DOI") == [thalis[0]]


def test_search_invalid_input_returns_empty_list():
    assert search_menu([], "x") == []
    assert search_menu(SAMPLE_THALIS, 5) == []
    assert search_menu(SAMPLE_THALIS, None) == []
    assert search_menu("Rajasthani Thali", "dal") == []
    assert search_menu(None, "dal") == []


def test_search_rejects_collection_with_malformed_element():
    broken = SAMPLE_THALIS + [{"name": "No Items Thali"}]
    assert search_menu(broken, "dal") == []
