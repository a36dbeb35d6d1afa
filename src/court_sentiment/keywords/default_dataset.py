"""
Extended default keyword dataset used by the reseed operation.

Vietnamese terms tuned on court reviews, grouped by polarity class.
Each entry is (keyword, weight, category name).
"""

from typing import Dict, List, Tuple

DEFAULT_LANGUAGE = "vi"

# name -> (description, color)
DEFAULT_CATEGORIES: Dict[str, Tuple[str, str]] = {
    "Chất lượng": ("Quality", "#3b82f6"),
    "Thái độ phục vụ": ("Service attitude", "#8b5cf6"),
    "Cơ sở vật chất": ("Facilities", "#10b981"),
    "Giá cả": ("Pricing", "#f59e0b"),
    "Vệ sinh": ("Cleanliness", "#06b6d4"),
    "An toàn": ("Safety", "#ef4444"),
    "Khác": ("Other", "#6b7280"),
}

DEFAULT_POSITIVE: List[Tuple[str, float, str]] = [
    ("tốt", 1.0, "Chất lượng"),
    ("hay", 1.0, "Chất lượng"),
    ("đẹp", 1.1, "Cơ sở vật chất"),
    ("ổn", 0.8, "Chất lượng"),
    ("được", 0.9, "Chất lượng"),
    ("khá", 0.9, "Chất lượng"),
    ("bình thường", 0.6, "Chất lượng"),
    ("tuyệt", 1.4, "Chất lượng"),
    ("xuất sắc", 1.5, "Chất lượng"),
    ("hoàn hảo", 1.5, "Chất lượng"),
    ("tuyệt vời", 1.4, "Chất lượng"),
    ("tuyệt hảo", 1.4, "Chất lượng"),
    ("tuyệt đỉnh", 1.5, "Chất lượng"),
    ("ngoạn mục", 1.4, "Chất lượng"),
    ("tuyệt diệu", 1.4, "Chất lượng"),
    ("hoàn mỹ", 1.3, "Chất lượng"),
    ("lý tưởng", 1.2, "Chất lượng"),
    ("chuyên nghiệp", 1.3, "Thái độ phục vụ"),
    ("thân thiện", 1.2, "Thái độ phục vụ"),
    ("nhanh chóng", 1.1, "Thái độ phục vụ"),
    ("nhiệt tình", 1.2, "Thái độ phục vụ"),
    ("chu đáo", 1.3, "Thái độ phục vụ"),
    ("tận tình", 1.2, "Thái độ phục vụ"),
    ("hỗ trợ tốt", 1.2, "Thái độ phục vụ"),
    ("phục vụ tốt", 1.2, "Thái độ phục vụ"),
    ("giải quyết nhanh", 1.1, "Thái độ phục vụ"),
    ("lịch sự", 1.1, "Thái độ phục vụ"),
    ("gần gũi", 1.0, "Thái độ phục vụ"),
    ("dễ chịu", 1.0, "Thái độ phục vụ"),
    ("hài lòng", 1.3, "Khác"),
    ("vừa ý", 1.2, "Khác"),
    ("như mong đợi", 1.2, "Khác"),
    ("vượt mong đợi", 1.4, "Khác"),
    ("đáng mong đợi", 1.1, "Khác"),
    ("thỏa mãn", 1.3, "Khác"),
    ("yên tâm", 1.2, "An toàn"),
    ("tin cậy", 1.3, "An toàn"),
    ("đáng tin", 1.2, "An toàn"),
    ("chất lượng", 1.2, "Chất lượng"),
    ("chất lượng cao", 1.3, "Chất lượng"),
    ("chất lượng tốt", 1.2, "Chất lượng"),
    ("cao cấp", 1.3, "Chất lượng"),
    ("sang trọng", 1.2, "Chất lượng"),
    ("đẳng cấp", 1.3, "Chất lượng"),
    ("bền đẹp", 1.1, "Chất lượng"),
    ("tinh tế", 1.2, "Chất lượng"),
    ("tinh xảo", 1.2, "Chất lượng"),
    ("sạch sẽ", 1.2, "Vệ sinh"),
    ("sạch đẹp", 1.2, "Vệ sinh"),
    ("gọn gẽ", 1.1, "Vệ sinh"),
    ("ngăn nắp", 1.1, "Vệ sinh"),
    ("thoáng mát", 1.1, "Cơ sở vật chất"),
    ("rộng rãi", 1.1, "Cơ sở vật chất"),
    ("thoải mái", 1.1, "Cơ sở vật chất"),
    ("tiện nghi", 1.2, "Cơ sở vật chất"),
    ("hiện đại", 1.2, "Cơ sở vật chất"),
    ("đầy đủ", 1.1, "Cơ sở vật chất"),
    ("hoàn chỉnh", 1.1, "Cơ sở vật chất"),
    ("tiện lợi", 1.1, "Khác"),
    ("thuận tiện", 1.1, "Khác"),
    ("đáng tiền", 1.2, "Giá cả"),
    ("giá hợp lý", 1.1, "Giá cả"),
    ("giá tốt", 1.1, "Giá cả"),
    ("phải chăng", 1.0, "Giá cả"),
    ("rẻ", 0.8, "Giá cả"),
    ("tiết kiệm", 1.0, "Giá cả"),
    ("xứng đáng", 1.2, "Giá cả"),
    ("có giá trị", 1.2, "Giá cả"),
    ("an toàn", 1.2, "An toàn"),
    ("bảo đảm", 1.1, "An toàn"),
    ("ổn định", 1.1, "An toàn"),
    ("chắc chắn", 1.1, "An toàn"),
    ("đảm bảo", 1.1, "An toàn"),
    ("vững chắc", 1.1, "An toàn"),
    ("khuyên dùng", 1.3, "Khác"),
    ("nên thử", 1.2, "Khác"),
    ("đáng thử", 1.2, "Khác"),
    ("sẽ quay lại", 1.3, "Khác"),
    ("giới thiệu", 1.2, "Khác"),
    ("đề xuất", 1.1, "Khác"),
    ("yêu thích", 1.3, "Khác"),
    ("thích", 1.1, "Khác"),
    ("mê", 1.2, "Khác"),
    ("cuốn hút", 1.2, "Khác"),
    ("ấn tượng", 1.2, "Khác"),
    ("tuyệt cú mèo", 1.4, "Khác"),
    ("quá đỉnh", 1.3, "Khác"),
    ("cực kỳ tốt", 1.4, "Chất lượng"),
]

DEFAULT_NEGATIVE: List[Tuple[str, float, str]] = [
    ("tệ", 1.0, "Chất lượng"),
    ("dở", 1.0, "Chất lượng"),
    ("kém", 1.0, "Chất lượng"),
    ("xấu", 1.0, "Chất lượng"),
    ("tồi", 1.0, "Chất lượng"),
    ("không tốt", 1.0, "Chất lượng"),
    ("không hay", 0.9, "Chất lượng"),
    ("chưa tốt", 0.8, "Chất lượng"),
    ("ghê", 1.2, "Chất lượng"),
    ("tệ hại", 1.3, "Chất lượng"),
    ("tồi tệ", 1.2, "Chất lượng"),
    ("rác", 1.4, "Chất lượng"),
    ("phí", 1.1, "Chất lượng"),
    ("vô dụng", 1.3, "Chất lượng"),
    ("vô ích", 1.2, "Chất lượng"),
    ("không đáng", 1.1, "Giá cả"),
    ("chán", 0.8, "Khác"),
    ("buồn chán", 0.9, "Khác"),
    ("nhàm chán", 1.0, "Khác"),
    ("thất vọng", 1.3, "Khác"),
    ("không hài lòng", 1.2, "Khác"),
    ("không vừa ý", 1.1, "Khác"),
    ("thô lỗ", 1.3, "Thái độ phục vụ"),
    ("khó chịu", 1.2, "Thái độ phục vụ"),
    ("không chuyên nghiệp", 1.2, "Thái độ phục vụ"),
    ("thái độ tệ", 1.3, "Thái độ phục vụ"),
    ("phục vụ tệ", 1.2, "Thái độ phục vụ"),
    ("không nhiệt tình", 1.0, "Thái độ phục vụ"),
    ("lạnh lùng", 1.1, "Thái độ phục vụ"),
    ("hách dịch", 1.3, "Thái độ phục vụ"),
    ("cộc cằn", 1.2, "Thái độ phục vụ"),
    ("khinh thường", 1.4, "Thái độ phục vụ"),
    ("chất lượng kém", 1.2, "Chất lượng"),
    ("kém chất lượng", 1.2, "Chất lượng"),
    ("không chất lượng", 1.1, "Chất lượng"),
    ("hỏng", 1.1, "Cơ sở vật chất"),
    ("hư", 1.0, "Cơ sở vật chất"),
    ("cũ kỹ", 1.0, "Cơ sở vật chất"),
    ("lạc hậu", 1.1, "Cơ sở vật chất"),
    ("xuống cấp", 1.2, "Cơ sở vật chất"),
    ("không hiện đại", 0.9, "Cơ sở vật chất"),
    ("bẩn", 1.2, "Vệ sinh"),
    ("dơ", 1.1, "Vệ sinh"),
    ("bẩn thỉu", 1.4, "Vệ sinh"),
    ("không sạch sẽ", 1.1, "Vệ sinh"),
    ("lộn xộn", 1.0, "Vệ sinh"),
    ("bừa bộn", 1.1, "Vệ sinh"),
    ("hôi", 1.2, "Vệ sinh"),
    ("tanh", 1.1, "Vệ sinh"),
    ("mùi khó chịu", 1.2, "Vệ sinh"),
    ("đắt", 1.0, "Giá cả"),
    ("quá đắt", 1.2, "Giá cả"),
    ("đắt đỏ", 1.1, "Giá cả"),
    ("không đáng giá", 1.2, "Giá cả"),
    ("giá cắt cổ", 1.4, "Giá cả"),
    ("lãng phí", 1.1, "Giá cả"),
    ("tiền mất tật mang", 1.5, "Giá cả"),
    ("phí tiền", 1.2, "Giá cả"),
    ("không xứng tiền", 1.2, "Giá cả"),
    ("không an toàn", 1.3, "An toàn"),
    ("nguy hiểm", 1.4, "An toàn"),
    ("rủi ro", 1.2, "An toàn"),
    ("không tin cậy", 1.2, "An toàn"),
    ("bất ổn", 1.1, "An toàn"),
    ("chậm", 1.0, "Thái độ phục vụ"),
    ("lâu", 0.9, "Thái độ phục vụ"),
    ("chờ đợi lâu", 1.1, "Thái độ phục vụ"),
    ("mất thời gian", 1.0, "Thái độ phục vụ"),
    ("không đúng giờ", 1.1, "Thái độ phục vụ"),
    ("trễ", 1.0, "Thái độ phục vụ"),
    ("lận lưng", 1.5, "Khác"),
    ("không như quảng cáo", 1.3, "Khác"),
    ("gian lận", 1.5, "Khác"),
    ("không trung thực", 1.3, "Khác"),
    ("nói dối", 1.3, "Khác"),
    ("không nên", 1.0, "Khác"),
    ("tránh xa", 1.4, "Khác"),
    ("cảnh báo", 1.3, "Khác"),
    ("đừng đến", 1.3, "Khác"),
    ("không đề xuất", 1.2, "Khác"),
    ("không khuyên", 1.1, "Khác"),
    ("trải nghiệm tệ", 1.3, "Khác"),
    ("kinh nghiệm xấu", 1.2, "Khác"),
    ("tệ nhất từng trải", 1.4, "Khác"),
    ("không bao giờ nữa", 1.3, "Khác"),
    ("một lần là đủ", 1.2, "Khác"),
]

DEFAULT_STRONG_NEGATIVE: List[Tuple[str, float, str]] = [
    ("rất tệ", 2.0, "Chất lượng"),
    ("quá tệ", 2.0, "Chất lượng"),
    ("cực kỳ tệ", 2.0, "Chất lượng"),
    ("kinh khủng", 2.0, "Chất lượng"),
    ("thảm họa", 2.0, "Chất lượng"),
    ("tệ nhất", 1.8, "Chất lượng"),
    ("không thể tệ hơn", 1.9, "Chất lượng"),
    ("khủng khiếp", 1.8, "Chất lượng"),
    ("tồi tệ nhất", 1.8, "Chất lượng"),
    ("chán nản", 1.5, "Khác"),
    ("ghê tởm", 1.7, "Chất lượng"),
    ("đáng ghét", 1.6, "Khác"),
    ("lừa đảo", 2.0, "Khác"),
    ("lừa gát", 1.9, "Khác"),
    ("cướp", 2.0, "Khác"),
    ("ăn cắp", 1.8, "Khác"),
    ("lừa tiền", 1.9, "Giá cả"),
    ("bỏ túi", 1.7, "Giá cả"),
    ("chặt chém", 1.6, "Giá cả"),
    ("vô cùng thất vọng", 1.7, "Khác"),
    ("thất vọng tột độ", 1.7, "Khác"),
    ("cực kỳ thô lỗ", 1.8, "Thái độ phục vụ"),
    ("thái độ khủng khiếp", 1.7, "Thái độ phục vụ"),
    ("phục vụ tệ hại", 1.6, "Thái độ phục vụ"),
    ("đối xử tệ", 1.5, "Thái độ phục vụ"),
    ("xử tệ", 1.5, "Thái độ phục vụ"),
    ("mất tiền", 1.5, "Giá cả"),
    ("mất tiền oan", 1.7, "Giá cả"),
    ("phí tiền oan", 1.6, "Giá cả"),
    ("ném tiền qua cửa sổ", 1.6, "Giá cả"),
    ("báo cảnh sát", 2.0, "Khác"),
    ("tố cáo", 1.8, "Khác"),
    ("kiện tụng", 1.7, "Khác"),
    ("đưa ra tòa", 1.8, "Khác"),
    ("vi phạm pháp luật", 1.8, "Khác"),
    ("không bao giờ quay lại", 1.8, "Khác"),
    ("tuyệt đối không", 1.6, "Khác"),
    ("đừng bao giờ đến", 1.7, "Khác"),
    ("chết cũng không", 1.8, "Khác"),
    ("thà chết còn hơn", 1.9, "Khác"),
    ("cẩn thận", 1.4, "An toàn"),
    ("cực kỳ nguy hiểm", 1.8, "An toàn"),
    ("rất nguy hiểm", 1.6, "An toàn"),
    ("tuyệt đối tránh", 1.7, "Khác"),
    ("nghiêm cấm", 1.5, "Khác"),
    ("buồn nôn", 1.6, "Khác"),
    ("phẫn nộ", 1.6, "Khác"),
    ("tức giận", 1.4, "Khác"),
    ("điên tiết", 1.7, "Khác"),
    ("giận dữ", 1.5, "Khác"),
    ("làm hỏng danh tiếng", 1.7, "Khác"),
    ("uy tín tệ", 1.6, "Khác"),
    ("mất uy tín", 1.6, "Khác"),
    ("không còn tin tưởng", 1.5, "Khác"),
    ("mất niềm tin", 1.4, "Khác"),
    ("bẩn kinh khủng", 1.8, "Vệ sinh"),
    ("dơ bẩn", 1.5, "Vệ sinh"),
    ("hôi thối", 1.6, "Vệ sinh"),
    ("mùi hôi", 1.4, "Vệ sinh"),
    ("nồm nặc", 1.5, "Vệ sinh"),
    ("thảm họa hoàn toàn", 2.0, "Chất lượng"),
    ("thất bại thảm hại", 1.8, "Chất lượng"),
    ("sai lầm lớn", 1.6, "Khác"),
    ("hỏng hoàn toàn", 1.7, "Chất lượng"),
    ("thảm hại", 1.6, "Chất lượng"),
]

DEFAULT_KEYWORDS: Dict[str, List[Tuple[str, float, str]]] = {
    "positive": DEFAULT_POSITIVE,
    "negative": DEFAULT_NEGATIVE,
    "strong_negative": DEFAULT_STRONG_NEGATIVE,
}
