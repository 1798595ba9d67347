from storefront.ddd.commands import Command
from storefront.ddd.catalog import Catalog
from storefront.ddd.domain_module import DomainModule

__all__ = ["Command", "Catalog", "DomainModule"]
