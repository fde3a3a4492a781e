import os
from datetime import datetime
from pymongo import MongoClient
from dotenv import load_dotenv

# Load biến môi trường (.env khi chạy local)
load_dotenv()
# local MongoDB connection string
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/")
DB_NAME = os.getenv("MONGO_DB_NAME", "xien3")

# --- Mongo Atlas ---
ATLAS_URI = os.getenv("MONGO_ATLAS_URI", "")
ATLAS_DB_NAME = os.getenv("MONGO_ATLAS_DB", "xien3")

# Collection lưu dự đoán gần nhất của mỗi phiên
DU_DOAN_COLLECTION = "du_doan_xien3"

client = None
db = None

client_atlas = None
db_atlas = None


def init_db():
    global client, db, client_atlas, db_atlas
    try:
        client = MongoClient(MONGO_URI)
        db = client[DB_NAME]
        print(f"✅ Đã kết nối tới MongoDB database: {DB_NAME}")
    except Exception as e:
        print("❌ Lỗi kết nối MongoDB:", e)
        raise e
    try:
        if ATLAS_URI:
            client_atlas = MongoClient(ATLAS_URI)
            db_atlas = client_atlas[ATLAS_DB_NAME]
            print(f"✅ Đã kết nối tới MongoDB Atlas database: {ATLAS_DB_NAME}")
        else:
            print("⚠️ Chưa cấu hình ATLAS_URI, bỏ qua kết nối MongoDB Atlas.")
    except Exception as e:
        print("❌ Lỗi kết nối MongoDB Atlas:", e)
        raise e


def get_db(source=None):
    if source == "local":
        if db is None:
            raise RuntimeError("⚠️ Database local chưa được khởi tạo. Gọi init_db() trước.")
        return db
    elif source == "atlas":
        if db_atlas is None:
            raise RuntimeError("⚠️ Database Atlas chưa được khởi tạo. Gọi init_db() trước.")
        return db_atlas

    # Không chỉ định: ưu tiên Atlas nếu có, ngược lại dùng local
    if db_atlas is not None:
        return db_atlas
    elif db is not None:
        return db
    raise RuntimeError("⚠️ Không có database nào được khởi tạo. Gọi init_db() trước.")


def luu_du_doan(database, session_id, ket_qua):
    """Lưu dàn nòng cốt + xiên 3 gần nhất của 1 phiên (ghi đè lần trước)."""
    database[DU_DOAN_COLLECTION].update_one(
        {"session_id": session_id},
        {"$set": {
            "session_id": session_id,
            "drawDate": ket_qua["analysis"]["drawDate"],
            "coreNumbers": ket_qua["coreNumbers"],
            "xien3Sets": ket_qua["xien3Sets"],
            "time": datetime.utcnow(),
        }},
        upsert=True,
    )


def lay_du_doan(database, session_id):
    """Lấy dự đoán đã lưu của phiên, None nếu chưa có."""
    doc = database[DU_DOAN_COLLECTION].find_one({"session_id": session_id})
    if not doc:
        return None
    return {
        "drawDate": doc.get("drawDate", ""),
        "coreNumbers": doc.get("coreNumbers", []),
        "xien3Sets": doc.get("xien3Sets", []),
    }
