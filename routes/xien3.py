from flask import Blueprint, request, current_app, jsonify
from datetime import datetime
from app.utils.xu_ly import xu_ly_yeu_cau
from app.utils.phan_tich import tom_tat_phan_tich
from app.utils.crawl import bang_dau_duoi_theo_ngay
from models.database import luu_du_doan, lay_du_doan

xien3_bp = Blueprint('xien3', __name__, url_prefix='/xien3')


def _phan_hoi(phan_hoi):
    if phan_hoi["type"] == "error":
        return jsonify({"error": phan_hoi["payload"]}), 400
    return jsonify(phan_hoi["payload"])


def _doc_yeu_cau():
    """Đọc body JSON; trả về (data, session_id, lỗi)."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return None, None, "Dữ liệu gửi lên phải là JSON object."

    # sessionId dùng làm filter Mongo nên chỉ nhận chuỗi
    session_id = data.get("sessionId")
    if session_id is not None and (not isinstance(session_id, str) or not session_id):
        return None, None, "sessionId không hợp lệ."
    return data, session_id, None


@xien3_bp.route('/api/phan-tich', methods=['POST'])
def api_phan_tich():
    data, session_id, loi = _doc_yeu_cau()
    if loi:
        return jsonify({"error": loi}), 400

    phan_hoi = xu_ly_yeu_cau({"type": "analyzeData", "payload": data})

    if phan_hoi["type"] != "error":
        ket_qua = phan_hoi["payload"]
        ket_qua["summary"] = tom_tat_phan_tich(ket_qua["analysis"])
        if session_id:
            luu_du_doan(current_app.db, session_id, ket_qua)

    return _phan_hoi(phan_hoi)


@xien3_bp.route('/api/doi-chieu', methods=['POST'])
def api_doi_chieu():
    data, session_id, loi = _doc_yeu_cau()
    if loi:
        return jsonify({"error": loi}), 400

    # Không gửi kèm dự đoán thì lấy dự đoán đã lưu của phiên
    if session_id and data.get("predictedCoreNumbers") is None:
        da_luu = lay_du_doan(current_app.db, session_id)
        if not da_luu:
            return jsonify({"error": "Chưa có dự đoán nào được lưu cho phiên này."}), 404
        data["predictedCoreNumbers"] = da_luu["coreNumbers"]
        data["predictedXien3Sets"] = da_luu["xien3Sets"]

    return _phan_hoi(xu_ly_yeu_cau({"type": "checkResults", "payload": data}))


@xien3_bp.route('/api/du-doan/<session_id>', methods=['GET'])
def api_du_doan(session_id):
    da_luu = lay_du_doan(current_app.db, session_id)
    if not da_luu:
        return jsonify({"error": "Chưa có dự đoán nào được lưu cho phiên này."}), 404
    return jsonify(da_luu)


@xien3_bp.route('/api/bang-dau-duoi', methods=['GET'])
def api_bang_dau_duoi():
    ngay = request.args.get('ngay')
    try:
        selected_date = datetime.strptime(ngay, "%d-%m-%Y").date() if ngay else None
    except ValueError:
        return jsonify({"error": "Ngày không hợp lệ, định dạng dd-mm-yyyy."}), 400

    bang = bang_dau_duoi_theo_ngay(selected_date, db=current_app.db)
    if bang is None:
        return jsonify({"error": "Chưa có kết quả cho ngày này."}), 404
    return jsonify({"ngay": ngay or datetime.today().strftime("%d-%m-%Y"), "rawData": bang})
