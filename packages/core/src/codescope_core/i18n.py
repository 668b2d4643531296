"""Display-language string tables.

All user-facing text goes through translate(); no other module branches on
the display language. A key missing from a locale falls back to English, and
a key missing from English falls back to the key itself.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    EN = "en"
    ZH_TW = "zh-tw"

    @classmethod
    def parse(cls, value: str | Language | None) -> Language:
        """Coerce a stored or user-supplied tag to a Language, defaulting to English."""
        if isinstance(value, Language):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.EN


TRANSLATIONS: dict[Language, dict[str, str]] = {
    Language.EN: {
        # Prompt
        "responseLanguageInstruction": (
            "Your entire response, including the markdown report and all JSON fields, must be in English (en)."
        ),
        # Analysis outcomes
        "emptyReportFallback": "The AI failed to generate an analysis report.",
        "errorMalformedResponse": "Failed to parse the AI response. It might be in an invalid format.",
        "errorInvalidCredentials": "The configured API key is invalid. Please check your settings.",
        "errorTransport": "An error occurred while communicating with the AI. Please try again later.",
        "emptyCode": "Please paste some code to analyze.",
        "loading": "Analyzing...",
        "reviewSaved": "Review saved to history as {id}.",
        # Results
        "analysisResults": "Analysis Results",
        "feedbackBy": "Feedback by {model}",
        "noIssues": "No issues found. Great job!",
        "detectedIssues": "Detected Issues",
        "category": "Category",
        "lineNumber": "Line",
        "description": "Description",
        "suggestion": "Suggestion",
        # Dashboard
        "dashboardTitle": "Dashboard",
        "noReviewsMessage": "No reviews yet. Run your first code review to see statistics here.",
        "codeQualityScore": "Code Quality Score",
        "issuesFound": "Issues Found",
        "vulnerabilities": "Vulnerabilities",
        "performanceScore": "Performance Score",
        "issueDistribution": "Issue Distribution",
        "qualityTrend": "Quality Trend",
        "recentReviews": "Recent Reviews",
        "date": "Date",
        "language": "Language",
        "issues": "Issues",
        "reviewId": "ID",
        "reviewNotFound": "No review with id {id}.",
        # Severities
        "critical": "Critical",
        "high": "High",
        "medium": "Medium",
        "low": "Low",
        "info": "Info",
        # Settings
        "settingsTitle": "Settings",
        "displayLanguage": "Display language",
        "theme": "Theme",
        "settingsSaved": "Settings saved.",
    },
    Language.ZH_TW: {
        "responseLanguageInstruction": (
            "Your entire response, including the markdown report and all JSON fields "
            "(like description, suggestion, category), must be in Traditional Chinese (zh-tw)."
        ),
        "emptyReportFallback": "AI 未能生成分析報告。",
        "errorMalformedResponse": "無法解析 AI 的回應。 AI 可能回傳了無效的格式。",
        "errorInvalidCredentials": "設定的 API 金鑰無效。請檢查您的設定。",
        "errorTransport": "與 AI 通訊時發生錯誤。請稍後再試。",
        "emptyCode": "請貼上要分析的程式碼。",
        "loading": "分析中...",
        "reviewSaved": "審查結果已儲存至歷史紀錄，編號 {id}。",
        "analysisResults": "分析結果",
        "feedbackBy": "由 {model} 提供回饋",
        "noIssues": "沒有發現任何問題，做得好！",
        "detectedIssues": "偵測到的問題",
        "category": "類別",
        "lineNumber": "行號",
        "description": "描述",
        "suggestion": "建議",
        "dashboardTitle": "儀表板",
        "noReviewsMessage": "尚無審查紀錄。執行第一次程式碼審查後即可在此查看統計資料。",
        "codeQualityScore": "程式碼品質分數",
        "issuesFound": "發現的問題",
        "vulnerabilities": "安全漏洞",
        "performanceScore": "效能分數",
        "issueDistribution": "問題分佈",
        "qualityTrend": "品質趨勢",
        "recentReviews": "最近的審查",
        "date": "日期",
        "language": "語言",
        "issues": "問題",
        "reviewId": "編號",
        "reviewNotFound": "找不到編號為 {id} 的審查紀錄。",
        "critical": "嚴重",
        "high": "高",
        "medium": "中",
        "low": "低",
        "info": "資訊",
        "settingsTitle": "設定",
        "displayLanguage": "顯示語言",
        "theme": "主題",
        "settingsSaved": "設定已儲存。",
    },
}


def translate(key: str, language: str | Language = Language.EN, **kwargs) -> str:
    """Look up `key` for `language`, formatting any `{placeholders}` from kwargs."""
    lang = Language.parse(language)
    text = TRANSLATIONS[lang].get(key) or TRANSLATIONS[Language.EN].get(key) or key
    return text.format(**kwargs) if kwargs else text
