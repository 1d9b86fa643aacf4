"""
데이터베이스 시드 스크립트

HTTP 서버 없이 시드를 실행합니다.
결과 JSON을 출력하고 성공 시 0, 실패 시 1로 종료합니다.
"""

import json
import sys

from app.core.seeder import seed_database


def main() -> int:
    """시드 실행 후 종료 코드 반환"""
    result = seed_database()
    print(json.dumps(result.body))
    return 0 if result.status_code == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
