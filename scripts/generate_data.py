"""
Synthetic Data Generator for the Storefront services

Seeds a demo catalog and a set of orders through the service layer, so the
stock guard and the order lifecycle rules apply to the generated data too.
Runs against the all-in-one settings by default.

Run: python scripts/generate_data.py
"""
import os
import sys
import random
from decimal import Decimal

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Setup Django
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

import django
django.setup()

from faker import Faker
from apps.orders.models import OrderStatus
from apps.orders.services import get_order_service
from apps.products.services import get_product_service

fake = Faker()


PRODUCT_TEMPLATES = [
    ('Gaming Monitor', 'Electronics', 299.99, 599.99),
    ('Wireless Headphones', 'Electronics', 49.99, 299.99),
    ('Mechanical Keyboard', 'Electronics', 79.99, 199.99),
    ('USB-C Hub', 'Electronics', 19.99, 89.99),
    ('Running Shoes', 'Sports', 49.99, 199.99),
    ('Yoga Mat', 'Sports', 19.99, 79.99),
    ('Denim Jeans', 'Clothing', 39.99, 129.99),
    ('Winter Jacket', 'Clothing', 79.99, 299.99),
    ('Coffee Maker', 'Home', 29.99, 199.99),
    ('Air Fryer', 'Home', 49.99, 199.99),
    ('Programming Book', 'Books', 29.99, 79.99),
    ('Board Game', 'Toys', 24.99, 59.99),
]


def clear_all_data(product_service, order_service):
    """Remove every order and product."""
    print("Clearing existing data...")
    orders = order_service.store.delete_all()
    products = product_service.store.delete_all()
    print(f"Deleted {orders} orders and {products} products")


def generate_products(product_service, count=40):
    """Generate catalog products."""
    print(f"Generating {count} products...")
    products = []

    while len(products) < count:
        name_base, category, min_price, max_price = random.choice(PRODUCT_TEMPLATES)
        variation = random.choice(['Pro', 'Lite', 'Plus', 'Max', 'Mini', ''])
        product = product_service.create_product({
            'name': f"{name_base} {variation}".strip(),
            'description': fake.sentence(nb_words=12),
            'price': Decimal(str(round(random.uniform(min_price, max_price), 2))),
            'stock': random.randint(0, 200),
            'category': category,
        })
        products.append(product)

    # Retire a few products so the listings have something to hide
    for product in random.sample(products, max(1, count // 10)):
        product_service.delete_product(product.id).unwrap()

    print(f"Created {len(products)} products")
    return products


def generate_orders(product_service, order_service, products, count=80):
    """Generate orders, taking the ordered quantity out of stock."""
    print(f"Generating {count} orders...")
    orders = []
    rejected = 0

    for _ in range(count):
        product = random.choice(products)
        quantity = random.randint(1, 5)

        result = product_service.update_stock(product.id, -quantity)
        if not result.ok:
            rejected += 1
            continue

        order = order_service.create_order({
            'product_id': product.id,
            'quantity': quantity,
            'total_amount': product.price * quantity,
            'customer_email': fake.email(),
            'customer_name': fake.name(),
            'shipping_address': fake.address(),
            'notes': fake.sentence() if random.random() < 0.2 else None,
        })
        orders.append(order)

    print(f"Created {len(orders)} orders ({rejected} rejected for insufficient stock)")
    return orders


def advance_orders(order_service, orders):
    """Move orders through their lifecycle and cancel some of them."""
    print("Advancing order statuses...")
    statuses = [
        OrderStatus.PENDING,
        OrderStatus.CONFIRMED,
        OrderStatus.PROCESSING,
        OrderStatus.SHIPPED,
        OrderStatus.DELIVERED,
    ]
    cancelled = 0
    refused = 0

    for order in orders:
        status = random.choice(statuses)
        if status != OrderStatus.PENDING:
            order_service.update_order_status(order.id, status).unwrap()

        if random.random() < 0.15:
            if order_service.cancel_order(order.id).ok:
                cancelled += 1
            else:
                refused += 1

    print(f"Cancelled {cancelled} orders, {refused} cancellations refused")


def main():
    """Main function to generate all data."""
    print("\n" + "="*60)
    print("Storefront Synthetic Data Generator")
    print("="*60 + "\n")

    product_service = get_product_service()
    order_service = get_order_service()

    clear_all_data(product_service, order_service)

    products = generate_products(product_service, 40)
    orders = generate_orders(product_service, order_service, products, 80)
    advance_orders(order_service, orders)

    print("\n" + "="*60)
    print("Data Generation Complete!")
    print("="*60)
    print(f"\nSummary:")
    print(f"  - Products: {len(products)}")
    print(f"  - Orders: {len(orders)}")


if __name__ == '__main__':
    main()
