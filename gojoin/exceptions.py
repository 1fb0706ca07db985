"""例外定義."""


class GojoinError(Exception):
    """gojoin の例外の基底クラス."""


class EmptyInputError(GojoinError):
    """取り込みテキストに空行以外の行が 1 行もない."""


class PayloadDecodeError(GojoinError):
    """取り込みファイルを UTF-8 として読めない."""


class MalformedFragmentError(GojoinError, ValueError):
    """共有フラグメントの値がパラメータの許容範囲外.

    Attributes:
        key: フラグメントのキー
        value: 解釈できなかった値
    """

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"不正なフラグメント値: {key}={value!r}")
