"""Static articles served when every real provider is unavailable."""

from typing import List

from vtvnews.models import Article, ArticleSource

MOCK_ARTICLES = [
    {
        "source": {"id": "vtv", "name": "VTV News"},
        "author": "Ban Thời sự",
        "title": "Việt Nam đẩy mạnh chuyển đổi số trong năm 2024",
        "description": "Chính phủ đặt mục tiêu phát triển kinh tế số chiếm 20% GDP.",
        "url": "https://vtv.vn/chuyen-doi-so-2024.htm",
        "url_to_image": "https://vtv.vn/images/chuyen-doi-so.jpg",
        "published_at": "2024-01-15T02:30:00Z",
        "content": "Chuyển đổi số tiếp tục là động lực tăng trưởng của Việt Nam.",
    },
    {
        "source": {"id": "vtv", "name": "VTV News"},
        "author": "Ban Kinh tế",
        "title": "Xuất khẩu nông sản Việt Nam đạt kỷ lục",
        "description": "Kim ngạch xuất khẩu gạo, cà phê và trái cây tăng mạnh.",
        "url": "https://vtv.vn/xuat-khau-nong-san.htm",
        "url_to_image": "https://vtv.vn/images/xuat-khau.jpg",
        "published_at": "2024-01-14T09:00:00Z",
        "content": "Các thị trường châu Âu và Trung Quốc tiếp tục tăng nhập khẩu.",
    },
    {
        "source": {"id": "vtv", "name": "VTV News"},
        "author": "Ban Thể thao",
        "title": "Đội tuyển Việt Nam chuẩn bị cho vòng loại World Cup",
        "description": "Ban huấn luyện công bố danh sách triệu tập mới.",
        "url": "https://vtv.vn/doi-tuyen-viet-nam.htm",
        "url_to_image": "https://vtv.vn/images/doi-tuyen.jpg",
        "published_at": "2024-01-13T12:45:00Z",
        "content": "Đội tuyển sẽ hội quân tại Hà Nội vào tuần tới.",
    },
]


class MockNewsProvider:
    """Last-resort provider that always succeeds with the same three articles."""

    name = "mock"

    def articles(self) -> List[Article]:
        # Fresh models per call; callers enrich them in place
        return [
            Article(**{**data, "source": ArticleSource(**data["source"])})
            for data in MOCK_ARTICLES
        ]
