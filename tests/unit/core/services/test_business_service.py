"""Tests pour BusinessService (logique metier pure, sans port)."""

from hexamessage.core.services.business_service import BusinessService


class TestBusinessService:
    """Tests pour perform_business_logic."""

    def test_returns_success_literal(self, business_service):
        """Le resultat est exactement le message de succes attendu."""
        assert (
            business_service.perform_business_logic()
            == "Business logic executed successfully!"
        )

    def test_result_is_stable_across_calls_and_instances(self):
        """Sans etat : meme resultat a chaque appel et pour chaque instance."""
        results = {BusinessService().perform_business_logic() for _ in range(3)}
        assert results == {"Business logic executed successfully!"}
