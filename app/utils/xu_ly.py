import re
import traceback

from .bang_dau_duoi import FormatError, parse_bang_dau_duoi, parse_ket_qua_thuc
from .phan_tich import phan_tich_ky_truoc
from .chien_luoc import tao_chien_luoc
from .nong_cot import tao_so_nong_cot, tao_xien3
from .doi_chieu import doi_chieu_ket_qua

LOI_CHUNG = "Đã xảy ra lỗi khi xử lý dữ liệu. Vui lòng kiểm tra lại và thử lại."


def _doc_so(v, ten):
    # chỉ nhận int (không nhận bool) hoặc chuỗi toàn chữ số 0-9
    if isinstance(v, int) and not isinstance(v, bool):
        return v
    if isinstance(v, str) and re.fullmatch(r"[0-9]+", v.strip()):
        return int(v)
    raise FormatError(f"Dữ liệu {ten} không hợp lệ.")


def _doc_danh_sach_so(values, ten):
    if not isinstance(values, (list, tuple)):
        raise FormatError(f"Dữ liệu {ten} không hợp lệ.")
    return [_doc_so(v, ten) for v in values]


def xu_ly_phan_tich(payload):
    """rawData + drawDate -> phân tích, chiến lược, 20 số nòng cốt, 100 bộ xiên 3."""
    raw_data = payload.get("rawData", "")
    draw_date = payload.get("drawDate", "")

    parsed = parse_bang_dau_duoi(raw_data)
    analysis = phan_tich_ky_truoc(parsed, draw_date)
    strategy = tao_chien_luoc(analysis)
    core_numbers = tao_so_nong_cot(analysis, strategy)
    xien3_sets = tao_xien3(core_numbers)

    return {
        "analysis": analysis,
        "strategy": strategy,
        "coreNumbers": core_numbers,
        "xien3Sets": xien3_sets,
    }


def xu_ly_doi_chieu(payload):
    """actualRawData + dự đoán đã lưu -> kết quả đối chiếu."""
    core_numbers = _doc_danh_sach_so(payload.get("predictedCoreNumbers"), "số nòng cốt")
    xien3_raw = payload.get("predictedXien3Sets")
    if not isinstance(xien3_raw, (list, tuple)):
        raise FormatError("Dữ liệu bộ xiên 3 không hợp lệ.")
    xien3_sets = [_doc_danh_sach_so(bo, "bộ xiên 3") for bo in xien3_raw]

    actual = parse_ket_qua_thuc(payload.get("actualRawData", ""))
    return doi_chieu_ket_qua(actual, core_numbers, xien3_sets)


XU_LY_THEO_LOAI = {
    "analyzeData": ("analysisComplete", xu_ly_phan_tich),
    "checkResults": ("checkResultsComplete", xu_ly_doi_chieu),
}


def xu_ly_yeu_cau(message):
    """
    Nhận 1 yêu cầu {"type", "payload"} và trả đúng 1 phản hồi:
        {"type": "analysisComplete" | "checkResultsComplete", "payload": {...}}
        {"type": "error", "payload": "<thông báo lỗi>"}
    """
    loai = (message or {}).get("type")
    if loai not in XU_LY_THEO_LOAI:
        print(f"⚠️ Loại yêu cầu không xác định: {loai}")
        return {"type": "error", "payload": "Loại yêu cầu không hợp lệ."}

    loai_phan_hoi, ham_xu_ly = XU_LY_THEO_LOAI[loai]
    try:
        ket_qua = ham_xu_ly(message.get("payload") or {})
    except FormatError as e:
        return {"type": "error", "payload": str(e)}
    except Exception as e:
        print(f"❌ Lỗi khi xử lý yêu cầu {loai}: {e}")
        traceback.print_exc()
        return {"type": "error", "payload": LOI_CHUNG}

    return {"type": loai_phan_hoi, "payload": ket_qua}
