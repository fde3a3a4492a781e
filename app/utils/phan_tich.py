CAM = "CÂM"
MANH = "Mạnh"
KHA_MANH = "Khá Mạnh"
YEU = "Yếu"


def danh_gia_trang_thai(count):
    """Đánh giá trạng thái của 1 đầu/đuôi theo số lần xuất hiện."""
    if count == 0:
        return CAM
    if count >= 4:
        return MANH
    if count <= 2:
        return YEU
    return KHA_MANH


def phan_tich_ky_truoc(parsed, draw_date):
    """
    Phân tích kết quả kỳ quay trước từ bảng Đầu - Đuôi đã parse.

    - heads[d]["count"]: số đuôi của đầu d (đuôi trùng vẫn được đếm)
    - tails[d]["count"]: số lần đuôi d xuất hiện
    - allNumbers: các số đã về, không trùng, tăng dần
    Đầu không có trong parsed được tính là câm.
    """
    heads = {i: {"count": 0, "note": ""} for i in range(10)}
    tails = {i: {"count": 0, "note": ""} for i in range(10)}
    all_numbers = set()

    for head, tail_list in parsed.items():
        if head in heads:
            heads[head]["count"] = len(tail_list)

    for head in range(10):
        for tail in parsed.get(head, []):
            if 0 <= tail <= 9:
                tails[tail]["count"] += 1
                all_numbers.add(head * 10 + tail)

    # Gán trạng thái sau khi đã đếm xong
    for i in range(10):
        heads[i]["note"] = danh_gia_trang_thai(heads[i]["count"])
        tails[i]["note"] = danh_gia_trang_thai(tails[i]["count"])

    return {
        "drawDate": draw_date,
        "heads": heads,
        "tails": tails,
        "allNumbers": sorted(all_numbers),
    }


def tom_tat_phan_tich(analysis):
    """Gom các đầu/đuôi theo trạng thái để hiển thị nhanh."""
    tom_tat = {}
    for vai_tro in ("heads", "tails"):
        bang = analysis[vai_tro]
        tom_tat[vai_tro] = {
            note: [i for i in range(10) if bang[i]["note"] == note]
            for note in (CAM, YEU, KHA_MANH, MANH)
        }
    return tom_tat
