"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "그림자 계산기",
        "en": "Shadow",
    },
    "hero": {
        "ko": "지구 어디서든, 언제든 그림자의 길이를 알아보세요.",
        "en": "Discover the length of your shadow anywhere on Earth, at any time.",
    },
    "section_params": {
        "ko": "그림자 조건",
        "en": "Shadow Parameters",
    },
    "label_height": {
        "ko": "키",
        "en": "Height",
    },
    "label_unit": {
        "ko": "단위",
        "en": "Unit",
    },
    "label_city": {
        "ko": "도시 검색",
        "en": "Search city",
    },
    "label_city_match": {
        "ko": "검색 결과",
        "en": "Matches",
    },
    "label_lat": {
        "ko": "위도",
        "en": "Latitude",
    },
    "label_lon": {
        "ko": "경도",
        "en": "Longitude",
    },
    "label_direction": {
        "ko": "바라보는 방향",
        "en": "Direction faced",
    },
    "label_footwear": {
        "ko": "신발",
        "en": "Footwear",
    },
    "label_date": {
        "ko": "날짜",
        "en": "Date",
    },
    "label_time": {
        "ko": "시각",
        "en": "Time",
    },
    "btn_calculate": {
        "ko": "그림자 계산하기",
        "en": "Calculate Shadow",
    },
    "section_measurements": {
        "ko": "측정 결과",
        "en": "Measurements",
    },
    "unit_feet": {
        "ko": "피트",
        "en": "Feet",
    },
    "unit_planck": {
        "ko": "플랑크 길이",
        "en": "Planck Lengths",
    },
    "unit_light_years": {
        "ko": "광년",
        "en": "Light-years",
    },
    "unit_horses": {
        "ko": "말 길이",
        "en": "Horses",
    },
    "weather_caption": {
        "ko": "{temperature:.0f}°C · 구름 {cloud_cover:.0f}% · 가시거리 {visibility}",
        "en": "{temperature:.0f}°C · clouds {cloud_cover:.0f}% · visibility {visibility}",
    },
    "section_soul": {
        "ko": "영혼의 실루엣",
        "en": "Soul Silhouette",
    },
    "soul_subtitle": {
        "ko": "그림자가 말해주는 것",
        "en": "What your shadow reveals",
    },
    "no_shadow_title": {
        "ko": "그림자 없음",
        "en": "No Shadow",
    },
    "no_shadow_body": {
        "ko": "이 시각에는 해가 지평선 아래에 있어 그림자가 생기지 않아요. (태양 고도 {altitude:.1f}°)",
        "en": "The sun is below the horizon at this time. No shadow can be cast. (sun altitude {altitude:.1f}°)",
    },
    "error_input": {
        "ko": "입력을 확인해주세요. ({error})",
        "en": "Unable to calculate shadow. Please check your inputs. ({error})",
    },
    "error_city": {
        "ko": "도시를 찾을 수 없어요. ({error})",
        "en": "City not found. ({error})",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
