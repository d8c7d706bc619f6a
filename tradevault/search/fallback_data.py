"""
Built-in catalogue used when the database is unavailable.

These records mirror the platform's demo data: eight UAE trade assets, the
three demo accounts and their investments. The same records can be loaded
into the database with ``tradevault.core.seed.seed_search_tables``.
"""

from tradevault.search.records import AssetRecord, InvestmentRecord, UserRecord

FALLBACK_ASSETS = (
    AssetRecord(
        id="asset-1",
        name="Jebel Ali-Dubai Container",
        type="container",
        apr="12.5%",
        risk="Medium",
        value="$45,000",
        route="Jebel Ali Port → Dubai",
        cargo="Electronics & Luxury Goods",
        description="High-value electronics and luxury goods container route from Jebel Ali Port to Dubai.",
        status="active",
        created_at="2024-01-15T10:00:00Z",
        issuer_id="demo-issuer-1",
    ),
    AssetRecord(
        id="asset-2",
        name="Abu Dhabi-Rotterdam Container",
        type="container",
        apr="11.8%",
        risk="Medium",
        value="$38,000",
        route="Abu Dhabi → Rotterdam",
        cargo="Petrochemicals & Oil Products",
        description="Petrochemicals and oil products container route from Abu Dhabi to Rotterdam.",
        status="active",
        created_at="2024-01-10T14:30:00Z",
        issuer_id="demo-issuer-1",
    ),
    AssetRecord(
        id="asset-3",
        name="Dubai Marina Office Tower",
        type="property",
        apr="8.2%",
        risk="Low",
        value="$350,000",
        route="Dubai Marina, UAE",
        cargo="Commercial Real Estate",
        description="Premium commercial office space in Dubai Marina with high rental yields.",
        status="active",
        created_at="2024-01-08T09:15:00Z",
        issuer_id="demo-issuer-1",
    ),
    AssetRecord(
        id="asset-4",
        name="Abu Dhabi Corniche Residential",
        type="property",
        apr="9.5%",
        risk="Low",
        value="$280,000",
        route="Abu Dhabi Corniche, UAE",
        cargo="Residential Real Estate",
        description="Luxury residential properties along Abu Dhabi Corniche with waterfront views.",
        status="active",
        created_at="2024-01-05T16:45:00Z",
        issuer_id="demo-issuer-1",
    ),
    AssetRecord(
        id="asset-5",
        name="Dubai Gold Souk Inventory",
        type="inventory",
        apr="15.1%",
        risk="High",
        value="$25,000",
        route="Dubai Gold Souk, UAE",
        cargo="Gold & Precious Metals",
        description="Premium gold and precious metals inventory from Dubai Gold Souk.",
        status="active",
        created_at="2024-01-12T11:20:00Z",
        issuer_id="demo-issuer-1",
    ),
    AssetRecord(
        id="asset-6",
        name="Sharjah Textile Market",
        type="inventory",
        apr="13.2%",
        risk="Medium",
        value="$18,000",
        route="Sharjah, UAE",
        cargo="Traditional Textiles & Fabrics",
        description="Traditional textiles and fabrics from Sharjah textile markets.",
        status="active",
        created_at="2024-01-14T13:30:00Z",
        issuer_id="demo-issuer-1",
    ),
    AssetRecord(
        id="asset-7",
        name="Dubai International Vault",
        type="vault",
        apr="6.8%",
        risk="Low",
        value="$20,000",
        route="Dubai International Financial Centre",
        cargo="Gold & Precious Metals",
        description="Secure vault storage for gold and precious metals at DIFC.",
        status="active",
        created_at="2024-01-07T08:00:00Z",
        issuer_id="demo-issuer-1",
    ),
    AssetRecord(
        id="asset-8",
        name="Abu Dhabi Diamond Vault",
        type="vault",
        apr="7.5%",
        risk="Low",
        value="$15,000",
        route="Abu Dhabi Global Market",
        cargo="Diamonds & Precious Stones",
        description="High-security vault for diamonds and precious stones at ADGM.",
        status="active",
        created_at="2024-01-09T12:15:00Z",
        issuer_id="demo-issuer-1",
    ),
)

FALLBACK_USERS = (
    UserRecord(
        id="demo-admin-1",
        email="admin@globalnext.rocks",
        first_name="Demo",
        last_name="Admin",
        role="admin",
        status="active",
        phone="+971501234567",
        country="UAE",
        kyc_status="approved",
        created_at="2024-01-15T10:00:00Z",
    ),
    UserRecord(
        id="demo-investor-1",
        email="investor@globalnext.rocks",
        first_name="Demo",
        last_name="Investor",
        role="investor",
        status="active",
        phone="+971507654321",
        country="UAE",
        kyc_status="approved",
        created_at="2024-01-10T09:00:00Z",
    ),
    UserRecord(
        id="demo-issuer-1",
        email="issuer@globalnext.rocks",
        first_name="Demo",
        last_name="Issuer",
        role="issuer",
        status="active",
        phone="+971501234568",
        country="UAE",
        kyc_status="approved",
        created_at="2024-01-15T10:00:00Z",
    ),
)

FALLBACK_INVESTMENTS = (
    InvestmentRecord(
        id="inv-1",
        user_id="demo-investor-1",
        asset_id="asset-1",
        amount=50000.0,
        status="completed",
        investment_type="primary",
        created_at="2024-01-15T10:00:00Z",
        expected_return=12.5,
    ),
    InvestmentRecord(
        id="inv-2",
        user_id="demo-investor-1",
        asset_id="asset-2",
        amount=75000.0,
        status="pending",
        investment_type="primary",
        created_at="2024-01-20T09:15:00Z",
        expected_return=11.8,
    ),
)
