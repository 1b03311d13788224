"""Parsing of approve and deny decisions sent in a chat room."""