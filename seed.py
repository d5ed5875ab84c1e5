from app import create_app, db
from app.models import Menu, MenuName, User

app = create_app()

with app.app_context():
    db.create_all()

    # Menu catalog
    for name in MenuName:
        if not Menu.query.filter_by(name=name).first():
            db.session.add(Menu(name=name))
            print(f"Menu {name.value} created.")

    # Local test account, normally created on first OAuth login
    if not db.session.get(User, 'admin'):
        db.session.add(User(id='admin', email='admin@meetup.local'))
        print("User admin created.")

    db.session.commit()
    print("Database seeded successfully.")
