# sockets/xien3_socket.py
from flask_socketio import emit
from app.utils.xu_ly import xu_ly_yeu_cau


def register_xien3_events(socketio):
    """Đăng ký các socket event phân tích / đối chiếu xiên 3."""

    @socketio.on("analyzeData")
    def on_analyze_data(data):
        # Phản hồi chỉ gửi lại cho client đã gửi yêu cầu
        phan_hoi = xu_ly_yeu_cau({"type": "analyzeData", "payload": data})
        emit(phan_hoi["type"], phan_hoi["payload"])

    @socketio.on("checkResults")
    def on_check_results(data):
        phan_hoi = xu_ly_yeu_cau({"type": "checkResults", "payload": data})
        emit(phan_hoi["type"], phan_hoi["payload"])
