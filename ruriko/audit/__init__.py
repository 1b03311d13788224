"""Audit room notifications."""