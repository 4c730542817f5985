"""JSON documents written to disk for the API tests."""

CAMPAIGNS_DOC = {
    "campaigns": [
        {
            "id": 1,
            "name": "Summer Sale",
            "status": "active",
            "medium": "social",
            "regional_performance": [
                {
                    "region": "Dubai", "country": "UAE", "impressions": 1000, "clicks": 50,
                    "conversions": 5, "spend": 100.0, "revenue": 400.0, "ctr": 5.0,
                    "conversion_rate": 10.0, "cpc": 2.0, "cpa": 20.0, "roas": 4.0,
                },
                {
                    "region": "Dubai", "country": "UAE-dup", "impressions": 1, "clicks": 1,
                    "conversions": 1, "spend": 1.0, "revenue": 1.0, "ctr": 1.0,
                    "conversion_rate": 1.0, "cpc": 1.0, "cpa": 1.0, "roas": 1.0,
                },
            ],
            "creatives": [
                {
                    "id": 101, "name": "Hero", "format": "image", "url": "https://cdn/101.jpg",
                    "performance_score": 8.5, "is_primary": True, "impressions": 900,
                    "clicks": 45, "ctr": 5.0, "a_b_test_variant": "A",
                },
                {
                    "id": 102, "name": "Story", "format": "video", "url": "https://cdn/102.mp4",
                    "performance_score": 7.0, "is_primary": False, "impressions": 100,
                    "clicks": 5, "ctr": 5.0,
                },
            ],
        },
        {
            "id": 2,
            "name": "Ramadan Offers",
            "status": "completed",
            "medium": "search",
            "regional_performance": [
                {
                    "region": "Cairo", "country": "Egypt", "impressions": 2000, "clicks": 80,
                    "conversions": 8, "spend": 160.0, "revenue": 640.0, "ctr": 4.0,
                    "conversion_rate": 10.0, "cpc": 2.0, "cpa": 20.0, "roas": 4.0,
                },
                {
                    "region": "Dubai", "country": "UAE", "impressions": 500, "clicks": 10,
                    "conversions": 1, "spend": 30.0, "revenue": 90.0, "ctr": 2.0,
                    "conversion_rate": 10.0, "cpc": 3.0, "cpa": 30.0, "roas": 3.0,
                },
            ],
            "creatives": [
                {
                    "id": 201, "name": "Text Ad", "format": "text", "url": "https://cdn/201.txt",
                    "performance_score": 9.0, "is_primary": True, "impressions": 2000,
                    "clicks": 80, "ctr": 4.0, "a_b_test_variant": "",
                },
            ],
        },
        {"id": 3, "name": "Draft", "status": "draft", "medium": "email"},
    ],
    "generated_at": "2024-06-30",
}

USERS_DOC = {
    "users": [
        {"id": 1, "username": "ahmed_hassan", "password": "ahmedadmin123",
         "email": "ahmed@example.com", "role": "admin"},
        {"id": 2, "username": "omar_mahmoud", "password": "omar789pass",
         "email": "omar@example.com", "role": "user"},
        {"id": 3, "username": "guest_account", "password": "guest000",
         "email": "guest@example.com", "role": "auditor"},
    ]
}

ENCRYPTED_USERS_DOC = {
    "users": [
        {"id": 1, "username": "ahmed_hassan", "password": "hotlkhktpu123",
         "email": "ahmed@example.com", "role": "admin"},
        {"id": 2, "username": "omar_mahmoud", "password": "vthy789whzz",
         "email": "omar@example.com", "role": "user"},
        {"id": 3, "username": "guest_account", "password": "nblza000",
         "email": "guest@example.com", "role": "auditor"},
    ]
}
