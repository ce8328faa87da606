from farm_setup.services.formatting import format_inr, group_indian


def test_indian_grouping():
    assert group_indian(0) == "0"
    assert group_indian(999) == "999"
    assert group_indian(1000) == "1,000"
    assert group_indian(150000) == "1,50,000"
    assert group_indian(12345678) == "1,23,45,678"


def test_format_inr_rounds_to_whole_rupees():
    assert format_inr(150000) == "₹1,50,000"
    assert format_inr(2499.6) == "₹2,500"
    assert format_inr(-1200) == "-₹1,200"
    assert format_inr(5000, symbol="Rs. ") == "Rs. 5,000"
