"""Static loan product catalog"""

from typing import Dict, Iterable, List

from prequal_gateway.domain.exceptions import UnknownProductError
from prequal_gateway.domain.models import ProductDefinition

DEFAULT_PRODUCTS = (
    ProductDefinition(
        id="home",
        name="Home Loan",
        description="Finance your dream home with competitive interest rates",
        min_amount=500_000,
        max_amount=50_000_000,
        min_income=25_000,
        min_credit_score=650,
        nominal_rate_range_text="8.50% - 9.50%",
        max_term_years=30,
    ),
    ProductDefinition(
        id="personal",
        name="Personal Loan",
        description="Meet any personal financial need with quick approval",
        min_amount=50_000,
        max_amount=2_500_000,
        min_income=20_000,
        min_credit_score=650,
        nominal_rate_range_text="10.50% - 19.00%",
        max_term_years=7,
    ),
    ProductDefinition(
        id="car",
        name="Car Loan",
        description="Finance your new car with easy EMIs",
        min_amount=100_000,
        max_amount=10_000_000,
        min_income=25_000,
        min_credit_score=650,
        nominal_rate_range_text="8.50% - 12.00%",
        max_term_years=7,
    ),
    ProductDefinition(
        id="education",
        name="Education Loan",
        description="Fund your education journey with low interest rates",
        min_amount=50_000,
        max_amount=2_000_000,
        min_income=15_000,
        min_credit_score=600,
        nominal_rate_range_text="8.50% - 12.00%",
        max_term_years=15,
    ),
)


class ProductCatalog:
    """Read-only lookup of loan products by id"""

    def __init__(self, products: Iterable[ProductDefinition] = DEFAULT_PRODUCTS):
        self._products: Dict[str, ProductDefinition] = {}
        for product in products:
            if product.id in self._products:
                raise ValueError(f"Duplicate product id: {product.id}")
            self._products[product.id] = product

    def get(self, product_id: str) -> ProductDefinition:
        """
        Raises:
            UnknownProductError: If no product has this id
        """
        try:
            return self._products[product_id]
        except KeyError:
            raise UnknownProductError(f"Unknown loan type: {product_id}") from None

    def list(self) -> List[ProductDefinition]:
        return list(self._products.values())

    def __contains__(self, product_id: str) -> bool:
        return product_id in self._products


default_catalog = ProductCatalog()
