"""
Tests for the form lookup endpoints: option lists and E-number checks.
"""


class TestLookups:
    """GET /api/config and /api/e-numbers/{code}"""

    def test_config_lists_options(self, client, test_settings):
        data = client.get("/api/config").json()
        assert data["wine_type_options"] == test_settings.wine_type_options
        assert "Preservative" in data["category_options"]
        assert data["max_image_bytes"] == 5 * 1024 * 1024

    def test_valid_e_number(self, client):
        data = client.get("/api/e-numbers/e330").json()
        assert data == {
            "code": "E330",
            "isValid": True,
            "message": "Valid E number (Antioxidants)",
            "category": "Antioxidants",
        }

    def test_e_number_with_suffix(self, client):
        data = client.get("/api/e-numbers/E150a").json()
        assert data["isValid"] is True
        assert data["category"] == "Colors"

    def test_e_number_out_of_range(self, client):
        data = client.get("/api/e-numbers/E850").json()
        assert data["isValid"] is False
        assert data["message"] == "E number is out of valid range"

    def test_e_number_without_prefix(self, client):
        data = client.get("/api/e-numbers/330").json()
        assert data["isValid"] is False
        assert data["message"] == 'E number must start with "E"'
