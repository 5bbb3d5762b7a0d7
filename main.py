import argparse

from utils.logger import setup_logger
from data.product_dao import JsonProductDao
from models.customer import Customer
from models.product import Product
from services.errors import BuyError
from services.shopping_service import ShoppingService

# Catalog written to an empty store on first run
DEMO_PRODUCTS = [
    ("P001", "Bread", 10),
    ("P002", "Milk", 5),
    ("P003", "Cookie", 1),
]

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Shopping cart demo")
    parser.add_argument("--storage-dir", default="data/storage")
    parser.add_argument("--log-dir", default="data/logs")
    parser.add_argument(
        "items", nargs="*", metavar="NAME=QTY",
        help="products to put in the cart, e.g. Bread=2 Milk=1"
    )
    return parser.parse_args(argv)

def seed_catalog(dao: JsonProductDao) -> None:
    if dao.get_all():
        return
    for sku, name, count in DEMO_PRODUCTS:
        dao.save(Product(sku=sku, name=name, count=count))

def main(argv=None) -> int:
    args = parse_args(argv)
    logger = setup_logger(args.log_dir)

    dao = JsonProductDao(args.storage_dir)
    seed_catalog(dao)
    shop = ShoppingService(dao)

    cart = shop.get_cart(Customer(customer_id=1, phone="000"))
    for spec in args.items:
        name, _, qty = spec.partition("=")
        product = shop.get_product_by_name(name)
        if product is None:
            logger.error(f"unknown product: {name}")
            return 2
        try:
            cart.add(product, int(qty or 1))
        except ValueError as e:
            logger.error(str(e))
            return 2

    try:
        bought = shop.buy(cart)
    except BuyError as e:
        logger.error(str(e))
        return 1

    if not bought:
        logger.info("nothing to buy")
    for p in shop.get_all_products():
        logger.info(f"{p.sku} {p.name}: {p.count} left")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
