from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Инициализация расширений без привязки к конкретному приложению

# База данных
db = SQLAlchemy()

# Авторизация по токену (request_loader, см. permissions.py)
login_manager = LoginManager()
