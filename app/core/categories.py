"""Forum category catalogue (icon and description per category)."""

from typing import Dict, List, Tuple

CATEGORY_INFO: Dict[str, Dict[str, str]] = {
    "Genel": {"icon": "💬", "description": "Genel konular, sohbet ve güncel olaylar hakkında konuşun"},
    "Dedikodu": {"icon": "🗣️", "description": "Kampüs dedikoduları ve güncel olaylar"},
    "Öğrenciler": {"icon": "👥", "description": "Öğrenci hayatı, etkinlikler ve deneyimler"},
    "Hocalar": {"icon": "👨‍🏫", "description": "Hocalar, dersler ve akademik deneyimler"},
    "İtiraf": {"icon": "💭", "description": "Anonim itiraflar ve kişisel deneyimler"},
    "Teknoloji": {"icon": "💻", "description": "Teknoloji, yazılım, donanım ve dijital dünya hakkında"},
    "Eğitim": {"icon": "📚", "description": "Eğitim, öğrenme, kurslar ve akademik konular"},
    "Spor": {"icon": "⚽", "description": "Spor haberleri, maçlar ve spor aktiviteleri"},
    "Sanat": {"icon": "🎨", "description": "Resim, heykel, tasarım ve sanat dünyası"},
    "Müzik": {"icon": "🎵", "description": "Müzik türleri, sanatçılar ve konserler"},
    "Film": {"icon": "🎬", "description": "Filmler, diziler ve sinema dünyası"},
    "Kitap": {"icon": "📖", "description": "Kitaplar, yazarlar ve edebiyat dünyası"},
    "Oyun": {"icon": "🎮", "description": "Video oyunları, oyun geliştirme ve oyun kültürü"},
    "Diğer": {"icon": "🔧", "description": "Diğer kategorilere uymayan konular"},
}

DEFAULT_CATEGORY_INFO = {"icon": "📁", "description": "Bu kategori hakkında"}


def get_category_info(name: str) -> Tuple[str, str]:
    """Return (icon, description) for a category, with a fallback for unknown names."""
    info = CATEGORY_INFO.get(name, DEFAULT_CATEGORY_INFO)
    return info["icon"], info["description"]


def list_category_names() -> List[str]:
    return list(CATEGORY_INFO.keys())
