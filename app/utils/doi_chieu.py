TIEN_VON = 1_000_000        # vốn cho cả dàn 100 bộ xiên 3
TIEN_THANG_XIEN3 = 650_000  # tiền trúng mỗi bộ


def tinh_lai_lo(so_bo_trung):
    return so_bo_trung * TIEN_THANG_XIEN3 - TIEN_VON


def doi_chieu_ket_qua(actual, core_numbers, xien3_sets):
    """
    So sánh dự đoán với kết quả thực tế.
    Trả về số nòng cốt trúng, các bộ xiên 3 trúng đủ 3 số và lãi/lỗ.
    """
    actual = list(actual)
    core = set(core_numbers)
    actual_set = set(actual)

    hit_core_numbers = [num for num in actual if num in core]
    hit_xien3_sets = [list(bo) for bo in xien3_sets if all(num in actual_set for num in bo)]

    return {
        "hitCoreNumbers": hit_core_numbers,
        "hitXien3Sets": hit_xien3_sets,
        "profit": tinh_lai_lo(len(hit_xien3_sets)),
    }
