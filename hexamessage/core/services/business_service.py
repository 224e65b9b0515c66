"""Service métier sans dépendance : logique de calcul pure."""

BUSINESS_SUCCESS_MESSAGE = "Business logic executed successfully!"


class BusinessService:
    """Service métier sans état."""

    def perform_business_logic(self) -> str:
        return BUSINESS_SUCCESS_MESSAGE
