import config


def share_text(score, url=config.SHARE_URL):
    """공유하기에 사용할 문구를 만듭니다."""
    return config.SHARE_TEMPLATE.format(score=int(score), url=url)
