"""Basic usage example for fluent string search."""

from dataclasses import dataclass
from typing import Optional

from fluent_search import SearchRequest, SearchType, StringComparison, search
from fluent_search.utils.logging_config import setup_logging


@dataclass
class Customer:
    name: str
    city: str
    email: Optional[str] = None
    notes: Optional[str] = None


CUSTOMERS = [
    Customer("Ann Smith", "London", "ann@example.com", "Prefers phone calls"),
    Customer("Bob Annand", "Leeds", "bob@example.org", "Called twice about billing"),
    Customer("Carol Jones", "London", None, "New account"),
    Customer("Dave Brown", "Bristol", "DAVE@EXAMPLE.COM", "Billing dispute, call back"),
]


def basic_search_demo():
    """Demonstrate the fluent search chain."""
    print("Fluent Search - Basic Usage Demo")
    print("=" * 40)
    
    print("\n1. Customers whose name or city contains 'Ann' or 'Bristol':")
    for customer in search(CUSTOMERS, "name", "city").containing("Ann", "Bristol"):
        print(f"   {customer.name} ({customer.city})")
    
    print("\n2. London customers whose name starts with 'C':")
    londoners = search(CUSTOMERS, "city").is_equal("London")
    for customer in search(londoners, "name").starts_with("C"):
        print(f"   {customer.name}")
    
    print("\n3. Email addresses ending in '.com', ignoring case:")
    results = (
        search(CUSTOMERS, "email")
        .set_culture(StringComparison.ORDINAL_IGNORE_CASE)
        .ends_with(".com")
    )
    for customer in results:
        print(f"   {customer.email}")
    
    print("\n4. Notes ranked by mentions of the whole word 'call':")
    ranked = (
        search(CUSTOMERS, "notes")
        .set_culture(StringComparison.CURRENT_CULTURE_IGNORE_CASE)
        .matching(SearchType.WHOLE_WORDS)
        .containing("call", "calls")
        .to_ranked()
    )
    for result in ranked.order_by_hits():
        print(f"   {result.hits} hit(s): {result.item.name}")
    
    print("\n5. Declarative request:")
    request = SearchRequest.model_validate({
        "properties": ["notes"],
        "operation": "containing_all",
        "terms": ["billing", "call"],
        "comparison": "current_culture_ignore_case",
    })
    for customer in request.apply(CUSTOMERS):
        print(f"   {customer.name}")


if __name__ == "__main__":
    setup_logging(level="INFO")
    basic_search_demo()
