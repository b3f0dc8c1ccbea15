# backend/create_demo_data.py
"""
Seed the database with demo users, restaurants, menus and payment methods.

    python create_demo_data.py

All demo users share the password ``Password123!``.
"""
from database.session import SessionLocal, init_db
from models.common import Role, Country, currency_for
from models.menu_item_model import MenuItem
from models.payment_method_model import PaymentMethod
from models.restaurant_model import Restaurant
from models.user_model import User
from services.auth_service import hash_password

DEFAULT_PASSWORD = "Password123!"

USERS = [
    ("nick@example.com", Role.ADMIN, Country.IN),
    ("captain.marvel@example.com", Role.MANAGER, Country.IN),
    ("captain.america@example.com", Role.MANAGER, Country.US),
    ("thanos@example.com", Role.MEMBER, Country.IN),
    ("thor@example.com", Role.MEMBER, Country.IN),
    ("travis@example.com", Role.MEMBER, Country.US),
]

# (name, description, price in minor units)
RESTAURANTS = {
    ("Spice Paradise", Country.IN): [
        ("Butter Chicken", "Creamy tomato-based curry with tender chicken", 35000),
        ("Paneer Tikka Masala", "Grilled cottage cheese in rich masala gravy", 28000),
        ("Biryani", "Fragrant basmati rice with spiced meat", 32000),
        ("Naan Bread", "Freshly baked Indian flatbread", 5000),
        ("Samosa", "Crispy pastry filled with spiced potatoes", 8000),
        ("Mango Lassi", "Sweet yogurt drink with mango", 12000),
    ],
    ("Mumbai Street Food", Country.IN): [
        ("Pav Bhaji", "Spiced vegetable mash with buttered bread rolls", 15000),
        ("Vada Pav", "Spiced potato fritter in a bread bun", 8000),
        ("Dosa", "Crispy rice crepe with potato filling", 12000),
        ("Masala Chai", "Spiced Indian tea with milk", 5000),
    ],
    ("American Diner", Country.US): [
        ("Classic Burger", "Beef patty with lettuce, tomato and cheese", 1299),
        ("French Fries", "Crispy golden fries", 499),
        ("Chicken Wings", "Buffalo wings with ranch dip", 1099),
        ("Milkshake", "Vanilla, chocolate or strawberry", 599),
    ],
    ("Pizza Palace", Country.US): [
        ("Margherita Pizza", "Tomato, mozzarella and basil", 1499),
        ("Pepperoni Pizza", "Loaded with pepperoni", 1699),
        ("Garlic Bread", "Toasted bread with garlic butter", 599),
        ("Tiramisu", "Coffee-flavoured Italian dessert", 699),
    ],
}

PAYMENT_METHODS = [
    # label, last4, exp_month, exp_year, is_default
    ("Mock Visa Card", "4242", 12, 2027, True),
    ("Mock Mastercard", "5555", 6, 2028, False),
]


def create_demo_data():
    init_db()
    db = SessionLocal()

    try:
        if db.query(User).first():
            print("Demo data already exists")
            return

        password_hash = hash_password(DEFAULT_PASSWORD)
        users = {}
        for email, role, country in USERS:
            u = User(
                email=email,
                password_hash=password_hash,
                role=role.value,
                country=country.value,
                is_email_verified=True,
            )
            db.add(u)
            users[email] = u
            print(f"User: {email} ({role.value}, {country.value})")
        db.flush()

        for (name, country), items in RESTAURANTS.items():
            r = Restaurant(name=name, country=country.value)
            currency = currency_for(country).value
            for item_name, description, price_cents in items:
                r.menu_items.append(MenuItem(
                    name=item_name,
                    description=description,
                    price_cents=price_cents,
                    currency=currency,
                ))
            db.add(r)
            print(f"Restaurant: {name} ({country.value}) with {len(items)} menu items")

        admin = users["nick@example.com"]
        for label, last4, exp_month, exp_year, is_default in PAYMENT_METHODS:
            db.add(PaymentMethod(
                label=label,
                brand="MOCK",
                last4=last4,
                exp_month=exp_month,
                exp_year=exp_year,
                is_default=is_default,
                created_by_user_id=admin.id,
            ))
            print(f"Payment method: {label} (MOCK ending in {last4})")

        db.commit()
        print(f"Demo data created. Password for all users: {DEFAULT_PASSWORD}")

    except Exception as e:
        print(f"Error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    create_demo_data()
