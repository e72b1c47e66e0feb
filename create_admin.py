import sys
from app import create_app
from app.extensions import db
from app.models.user import User
from app.utils.enums import UserRole
from app.utils.auth import hash_password

app = create_app()

with app.app_context():
    admin_email = (app.config.get("ADMIN_EMAIL") or "admin@example.com").strip().lower()
    admin_password = app.config.get("ADMIN_PASSWORD")
    if not admin_password:
        print("ADMIN_PASSWORD is not set", file=sys.stderr)
        sys.exit(1)

    admin_user = User.query.filter_by(email=admin_email).first()
    if not admin_user:
        admin_user = User(
            name='Admin User',
            email=admin_email,
            password=hash_password(admin_password),
            role=UserRole.ADMIN
        )
        db.session.add(admin_user)
        db.session.commit()
        print(f'Created admin user {admin_email}')
    elif admin_user.role is not UserRole.ADMIN:
        admin_user.role = UserRole.ADMIN
        db.session.commit()
        print(f'Promoted {admin_email} to ADMIN')
    else:
        print('Admin user already exists')
