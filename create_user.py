from app import create_app
from modules.staff.errors import RecordStoreError
from modules.staff.store import RecordStore
from storage import DatabaseStore


def create_user(app, username, email, password):
    with app.app_context():
        store = RecordStore(
            DatabaseStore(),
            admin_usernames=app.config["ADMIN_USERNAMES"],
            namespace=app.config["STORAGE_NAMESPACE"],
        )
        try:
            user = store.register(username, email, password)
        except RecordStoreError as exc:
            print(f"⚠️  Could not create '{username}': {exc}")
            return None

        role = "admin" if store.is_admin_username(user.username) else "user"
        print(f"✅ Created user: {user.username} (role: {role})")
        return user


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Register a new user.')
    parser.add_argument('username', help='Username')
    parser.add_argument('email', help='Email')
    parser.add_argument('password', help='Password')

    args = parser.parse_args()
    create_user(create_app(), args.username, args.email, args.password)
