"""オブジェクトキーの生成"""
import os


def single_file_key(source: str, bucket_prefix: str) -> str:
    """単一ファイルのキー: {prefix}/{ファイル名}"""
    return f"{bucket_prefix}/{os.path.basename(source)}"


def directory_prefix(file_path: str, root: str, bucket_prefix: str) -> str:
    """ディレクトリ内ファイルのキープレフィックス

    ファイルのディレクトリからルートパスを文字列として取り除く（パスとしての
    相対化ではない）。ルートと同じ文字列が途中に現れた場合もすべて除去される。
    """
    prefix = bucket_prefix + os.path.dirname(file_path).replace(root, "")
    return prefix.replace("\\", "/")


def directory_key(file_path: str, root: str, bucket_prefix: str) -> str:
    """ディレクトリ内ファイルのキー: {計算したprefix}/{ファイル名}"""
    prefix = directory_prefix(file_path, root, bucket_prefix)
    return f"{prefix}/{os.path.basename(file_path)}"
