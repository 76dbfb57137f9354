# -*- coding: utf-8 -*-
"""
Blog Domain

ブログ記事の管理（一覧・作成・更新・削除）、画像アップロード、
SEOキーワード提案を扱うドメイン。
"""
