import requests
from datetime import datetime, date
from bs4 import BeautifulSoup
from cloudscraper import create_scraper
from cloudscraper.exceptions import CloudflareException
from models.database import get_db
from app.utils.bang_dau_duoi import tao_bang_dau_duoi

URL_XSMB = "https://xoso.com.vn/xsmb-{ngay}.html"

CAC_GIAI = {
    "ĐB": "special-prize",
    "G1": "prize1",
    "G2": "prize2",
    "G3": "prize3",
    "G4": "prize4",
    "G5": "prize5",
    "G6": "prize6",
    "G7": "prize7",
}


# Hàm định dạng ngày để LƯU vào database (dạng 31-7-2025)
def format_date_for_db(d: date) -> str:
    return f"{d.day}-{d.month}-{d.year}"


def _doc_ngay(selected_date):
    if isinstance(selected_date, str):
        return datetime.strptime(selected_date, "%d-%m-%Y").date()
    return selected_date or date.today()


def doc_ket_qua_html(html):
    """Lấy danh sách số theo từng giải từ trang kết quả XSMB."""
    soup = BeautifulSoup(html, "lxml")
    return {
        giai: [p.text.strip() for p in soup.find_all(class_=css) if p.text.strip()]
        for giai, css in CAC_GIAI.items()
    }


def fetch_ket_qua(selected_date=None):
    """Lấy kết quả XSMB 1 ngày từ web. Trả về None nếu lỗi hoặc chưa có kết quả."""
    selected_date = _doc_ngay(selected_date)
    url = URL_XSMB.format(ngay=selected_date.strftime("%d-%m-%Y"))

    try:
        response = create_scraper().get(url, timeout=15)
    except (requests.RequestException, CloudflareException) as e:
        print(f"❌ Lỗi kết nối khi lấy kết quả {url}: {e}")
        return None

    if response.status_code != 200:
        print(f"❌ Lỗi khi lấy dữ liệu! HTTP {response.status_code}")
        return None

    ketqua = doc_ket_qua_html(response.text)
    if not any(ketqua.values()):
        print(f"⚠️ Chưa có kết quả XSMB ngày {selected_date.strftime('%d-%m-%Y')}.")
        return None

    return {
        "date": format_date_for_db(selected_date),
        "countNumbers": sum(len(v) for v in ketqua.values()),
        "ketqua": ketqua,
    }


def get_or_fetch_ket_qua(selected_date=None, db=None):
    """Lấy kết quả từ cache kq_xs, chưa có thì crawl rồi lưu lại."""
    selected_date = _doc_ngay(selected_date)
    db = db if db is not None else get_db()
    date_str = format_date_for_db(selected_date)

    result = db.kq_xs.find_one({"date": date_str})
    if result:
        return result

    result = fetch_ket_qua(selected_date)
    if result:
        db.kq_xs.update_one({"date": date_str}, {"$set": result}, upsert=True)
        print(f"✅ Đã lưu kết quả XSMB ngày {date_str} vào MongoDB.")
    return result


# Thống kê đầu - đuôi từ kết quả (2 số cuối của mỗi giải)
def thong_ke_dau_duoi(ketqua):
    thong_ke = {i: [] for i in range(10)}

    for giai, danh_sach in ketqua.items():
        for so in danh_sach:
            if len(so) >= 2:
                dau, duoi = so[-2], so[-1]
                if dau.isdigit() and duoi.isdigit():
                    thong_ke[int(dau)].append(int(duoi))

    for dau in thong_ke:
        thong_ke[dau].sort()
    return thong_ke


def bang_dau_duoi_theo_ngay(selected_date=None, db=None):
    """Trả về bảng "Đầu Đuôi" dạng text của 1 ngày, None nếu không lấy được kết quả."""
    result = get_or_fetch_ket_qua(selected_date, db=db)
    if not result:
        return None
    return tao_bang_dau_duoi(thong_ke_dau_duoi(result["ketqua"]))
