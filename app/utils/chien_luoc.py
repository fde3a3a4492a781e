from .phan_tich import CAM, YEU

SO_DAU_TIEM_NANG = 5
SO_DUOI_TIEM_NANG = 7


def _thu_tu_uu_tien(bang):
    # Câm trước, yếu sau, rồi đến số nhỏ hơn
    def key(digit):
        note = bang[digit]["note"]
        if note == CAM:
            return (0, digit)
        if note == YEU:
            return (1, digit)
        return (2, digit)
    return key


def chon_tiem_nang(bang, so_luong):
    """Chọn các chữ số tiềm năng trong 1 bảng đầu hoặc đuôi: ưu tiên câm, bù thêm yếu."""
    tiem_nang = [i for i in range(10) if bang[i]["note"] == CAM]

    for i in range(10):
        if len(tiem_nang) >= so_luong:
            break
        if bang[i]["note"] == YEU and i not in tiem_nang:
            tiem_nang.append(i)

    tiem_nang.sort(key=_thu_tu_uu_tien(bang))
    return tiem_nang[:so_luong]


def tao_chien_luoc(analysis):
    """Xác định đầu/đuôi tiềm năng dựa trên trạng thái câm, yếu của kỳ trước."""
    return {
        "potentialHeads": chon_tiem_nang(analysis["heads"], SO_DAU_TIEM_NANG),
        "potentialTails": chon_tiem_nang(analysis["tails"], SO_DUOI_TIEM_NANG),
    }
