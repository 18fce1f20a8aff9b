"""
User-facing messages (Traditional Chinese), shared by the API and the client components.
"""

# API responses
REPORT_RECEIVED = "回報完成，感謝您!"
REPORT_WRITE_FAILED = "資料庫寫入失敗"
REPORT_LIST_FAILED = "回報查詢失敗"
TYPES_QUERY_FAILED = "類型查詢失敗"
CITIES_QUERY_FAILED = "城市查詢失敗"
ORG_QUERY_FAILED = "業者查詢失敗"
ORG_CREATED = "業者新增成功"
ORG_CREATE_FAILED = "業者建立失敗"
MISSING_COORDINATES = "缺少經緯度參數"
NO_NEARBY_MATCH = "無附近媒合業者"
MATCH_FAILED = "媒合失敗"
SEED_COMPLETED = "已匯入初始業者資料"
SEED_FAILED = "初始業者資料匯入失敗"
INVALID_REQUEST = "請求參數錯誤"
DATABASE_UNAVAILABLE = "資料庫連線失敗"
INTERNAL_ERROR = "伺服器內部錯誤"

# Client components
CLIENT_SUBMIT_FAILED = "送出失敗，請確認網路或資料庫設定！"
CLIENT_CONNECTION_FAILED = "連線失敗，請檢查 API 主機或網路狀態！"
CLIENT_NO_NEARBY_MATCH = "附近暫無媒合業者"
CLIENT_MATCH_FAILED = "媒合失敗，請確認後端是否啟動"
CLIENT_GPS_UNSUPPORTED = "⚠️ 裝置不支援 GPS 功能"
CLIENT_GPS_ERROR_PREFIX = "⚠️ 無法取得定位："
