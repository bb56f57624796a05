from app import create_app
from errors import DuplicateUsername
from extensions import db
from modules.accounts.services import CredentialStore


def create_user(app, username, password):
    with app.app_context():
        try:
            user_id = CredentialStore(db.session).register(username, password)
        except DuplicateUsername:
            print(f"⚠️  User '{username}' already exists.")
            return None
        print(f"✅ Created user: {username} (id: {user_id})")
        return user_id

if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Create a new user.')
    parser.add_argument('username', help='Username')
    parser.add_argument('password', help='Password (stored as is)')

    args = parser.parse_args()
    create_user(create_app(), args.username, args.password)
