from flask import Flask
from flask_socketio import SocketIO
from dotenv import load_dotenv
from models.database import init_db, get_db
from routes import xien3
from sockets.xien3_socket import register_xien3_events
import os

load_dotenv()

# Khởi tạo SocketIO global
socketio = SocketIO(
    cors_allowed_origins="*",
    async_mode=os.getenv("SOCKETIO_ASYNC_MODE", "eventlet"),
    manage_session=True
)


def create_app(config=None):
    app = Flask(__name__)

    # SECRET_KEY dùng chung cho Flask session + SocketIO
    app.config['SECRET_KEY'] = os.getenv("SECRET_KEY", "default-secret-key")
    if config:
        app.config.update(config)

    # Khởi tạo socketio với app
    socketio.init_app(app)

    # Khởi tạo DB (khi test thì test tự gán app.db)
    if not app.config.get("TESTING"):
        init_db()
        app.db = get_db()

    # Đăng ký blueprint
    app.register_blueprint(xien3.xien3_bp)
    register_xien3_events(socketio)

    # Debug: in ra tất cả routes đã đăng ký
    if app.debug:
        for rule in app.url_map.iter_rules():
            print(rule.endpoint, rule)

    return app
